"""Runtime configuration for the user account store."""

import os
import logging

LOGLEVEL = int(os.environ.get('LOGLEVEL', logging.INFO))
LOG_JSON = os.environ.get('LOG_JSON', '1') == '1'
CHECK_USERNAME_INDEX = os.environ.get('CHECK_USERNAME_INDEX', '0') == '1'
