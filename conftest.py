import os
import django

# Set the Django settings module for test environment
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'facetsproject.settings')

# Setup Django
django.setup()
