LOG_LEVEL = "WARNING"

TAX_REGIME = "default"

# (upper_bound, rate) rows; leave empty to use TAX_REGIME
TAX_SLABS = []

PF_RATE = 0.12
FULL_DAY_HOURS = 8
TESTING = True
