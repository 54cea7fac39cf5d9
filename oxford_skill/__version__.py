#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

__name__ = 'oxford-word-lookup'
__description__ = 'Oxford Word Look Up voice skill'
__version__ = '1.0.0'
__author__ = 'Oxford Word Look Up developers'
__license__ = 'MIT'
__copyright__ = 'Copyright 2020, Deutsche Telekom AG'

# Version of the request/response envelope
__envelope_version__ = '1.0'
