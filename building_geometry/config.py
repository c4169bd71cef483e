# Application Global Variables
# This module serves as a way to share variables across different
# modules (global variables).

import os

# Flag that indicates to run in Debug mode or not. When running in Debug mode
# log messages are also echoed to the console. Generally, it's useful to set
# this to True while developing and set it to False for distribution.
DEBUG = False

# Gets the name of the add-in from the name of the folder the py file is in.
ADDIN_NAME = os.path.basename(os.path.dirname(__file__))
COMPANY_NAME = 'Custom'

# Logger used by lib.hostAddInUtils.log()
LOGGER_NAME = f'{COMPANY_NAME}.{ADDIN_NAME}'
