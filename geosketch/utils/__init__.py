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

# Export from module

from .attribute_mixin import AttributeMixin
from .logging import configure_logging, log, reset_logging

#===============================================================================

# Output sets as JSON lists and anything else JSON can't encode as a string
def set_as_list(s):
    return list(s) if isinstance(s, (set, frozenset)) else str(s)

#===============================================================================
