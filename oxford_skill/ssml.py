#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# SSML tag wrappers
#

SPEAK_OPEN = '<speak>'
SPEAK_CLOSE = '</speak>'


def speak(text: str) -> str:
    """ Wrap text in <speak/> tag

    @param text:
    @return:
    """
    return f'{SPEAK_OPEN}{text}{SPEAK_CLOSE}'


def is_ssml(text: str) -> bool:
    """ Check if text is already wrapped in <speak/> tag

    @param text:
    @return:
    """
    text = (text or '').strip()
    return text.startswith(SPEAK_OPEN) and text.endswith(SPEAK_CLOSE)
