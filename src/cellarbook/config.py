"""
Cellarbook Configuration
Centralized settings for the application
"""

import logging

# Minimum-age rule for new records
MIN_AGE_MONTHS = 6  # Nominal production date must be at least this old
NOMINAL_PRODUCTION_MONTH = 7  # Production date assumed to be July 1
NOMINAL_PRODUCTION_DAY = 1

# Premium records carry a vintage label; no prompt collects one yet
PREMIUM_VINTAGE_LABEL = "Special Vintage"

# Logging
LOG_LEVEL = logging.WARNING  # Keep interactive prompts free of log lines
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
