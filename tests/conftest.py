import os

os.environ.setdefault("LOG_FORMAT", "console")
os.environ.setdefault("ENABLE_DEBUG_LOG", "false")
