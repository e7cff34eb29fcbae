import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

TAX_REGIME = os.getenv("TAX_REGIME", "default")

PF_RATE = float(os.getenv("PF_RATE", "0.12"))
FULL_DAY_HOURS = float(os.getenv("FULL_DAY_HOURS", "8"))
