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

from typing import Any, Optional

#===============================================================================

class AttributeMixin:
    def __init__(self, attributes: Optional[dict[str, Any]]=None):
        self.__attributes: dict[str, Any] = {}
        if attributes is not None:
            self.__attributes.update(attributes)

    @property
    def attributes(self) -> dict[str, Any]:
        return self.__attributes

    def pop_attribute(self, key: str, default: Any=None) -> Any:
        return self.__attributes.pop(key, default)

    def set_attribute(self, key: str, value: Any) -> None:
        if value is None:
            self.pop_attribute(key)
        else:
            self.__attributes[key] = value

#===============================================================================
