import os

os.environ.setdefault("PLATFORM_ENVIRONMENT", "test")
