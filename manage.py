#!/usr/bin/env python
"""
Django's command-line utility for administrative tasks.

Órbita Board - Kanban de projetos e workflows
"""

import os
import sys


def main():
    """Run administrative tasks."""

    # Configuração padrão para desenvolvimento
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    # Comandos customizados do Órbita Board
    if len(sys.argv) > 1 and sys.argv[1] == 'setup':
        print("🚀 Configurando Órbita Board...")

        print("📊 Aplicando migrações...")
        if os.system(f'{sys.executable} manage.py migrate') != 0:
            print("❌ Erro nas migrações")
            return

        print("🌱 Populando banco com dados demo...")
        os.system(f'{sys.executable} manage.py seed')

        print("✅ Setup concluído!")
        return

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
