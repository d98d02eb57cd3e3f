#===============================================================================
#
#  Map sketching and GeoJSON tools
#
#  Copyright (c) 2024  geosketch contributors
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
#===============================================================================

from typing import Optional

#===============================================================================

class ClipboardError(IOError):
    pass

#===============================================================================

class Clipboard(object):
    """
    The system clipboard, which is unavailable unless a subclass provides it.
    """
    def write_text(self, text: str):
    #===============================
        raise ClipboardError('Clipboard is unavailable')

#===============================================================================

class MemoryClipboard(Clipboard):
    def __init__(self):
        self.__text: Optional[str] = None

    @property
    def text(self) -> Optional[str]:
        return self.__text

    def write_text(self, text: str):
    #===============================
        self.__text = text

#===============================================================================
