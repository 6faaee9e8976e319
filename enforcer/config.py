# Enforcer Config
# Central configuration for the Enforcer apps

import os

# Anthropic
ANTHROPIC_API_KEY = os.environ.get('ANTHROPIC_API_KEY')
ANTHROPIC_MODEL = os.environ.get('ANTHROPIC_MODEL', 'claude-sonnet-4-20250514')

# Server
PORT = int(os.environ.get('PORT', 8080))

SERVICE_VERSION = '1.0'
