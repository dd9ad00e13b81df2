"""
slashcord.types
~~~~~~~~~~~~~~~

Typings for the Discord application command payloads.

:copyright: (c) 2015-present Rapptz
:license: MIT, see LICENSE for more details.

"""
