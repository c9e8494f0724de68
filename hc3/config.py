import os

# Hub connection settings
HC3_HOST = os.getenv("HC3_HOST", "192.168.1.57")
HC3_USER = os.getenv("HC3_USER", "admin")
HC3_PASSWORD = os.getenv("HC3_PASSWORD", "admin")
