"""
Django App de Contas.

Adapters de persistência, HTTP e notificação para os domínios
src.core.users e src.core.accounts.
"""
