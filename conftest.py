import os

# Lets the suite run without a wallet key, see networks.require_private_key
os.environ.setdefault("FUNCTIONS_ENV", "test")
