#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# Oxford Word Look Up skill: importing the package registers all intent handlers
#

from . import conversation, word_lookup
