"""
Django Admin para o domínio de Contas.

Consulta de contas via interface web. O hash da senha nunca é exibido.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import AccountModel


@admin.register(AccountModel)
class AccountAdmin(admin.ModelAdmin):
    """Admin para AccountModel."""

    list_display = [
        'id_curto',
        'name',
        'email',
        'cpf',
        'kind_badge',
        'created_at',
    ]

    list_filter = [
        'kind',
        'created_at',
    ]

    search_fields = [
        'id',
        'name',
        'email',
        'cpf',
    ]

    readonly_fields = [
        'id',
        'created_at',
    ]

    fieldsets = [
        ('Identificação', {
            'fields': ['id', 'kind', 'name', 'email', 'cpf'],
        }),
        ('Contato', {
            'fields': ['birthdate', 'cellphone', 'whatsapp'],
        }),
        ('Perfil de professor', {
            'fields': ['photo', 'lattes', 'cv', 'about'],
            'classes': ['collapse'],
        }),
        ('Timestamps', {
            'fields': ['created_at'],
            'classes': ['collapse'],
        }),
    ]

    ordering = ['-created_at']

    date_hierarchy = 'created_at'

    def id_curto(self, obj):
        """Exibe ID curto (primeiros 8 caracteres)."""
        return obj.id[:8] + '...'
    id_curto.short_description = 'ID'

    def kind_badge(self, obj):
        """Exibe tipo da conta com badge colorido."""
        colors = {
            'user': '#17a2b8',
            'teacher': '#28a745',
        }
        color = colors.get(obj.kind, '#6c757d')
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; '
            'border-radius: 3px; font-size: 11px;">{}</span>',
            color,
            obj.get_kind_display()
        )
    kind_badge.short_description = 'Tipo'
