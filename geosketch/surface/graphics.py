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

from itertools import count
from typing import Any, Callable, Iterable, Iterator, NamedTuple, Optional

#===============================================================================

from geosketch.geometry import Extent
from geosketch.geometry.shapes import Geometry
from geosketch.utils import AttributeMixin, log

#===============================================================================

class Graphic(AttributeMixin):
    __ids = count(1)

    def __init__(self, geometry: Optional[Geometry]=None,
                       attributes: Optional[dict[str, Any]]=None):
        super().__init__(attributes)
        self.__id = next(Graphic.__ids)
        self.__geometry = geometry

    def __repr__(self):
        return 'Graphic {}: {}, {}'.format(self.__id, self.geom_type, self.attributes)

    @property
    def geom_type(self) -> Optional[str]:
        return getattr(self.__geometry, 'geom_type', None) if self.__geometry is not None else None

    @property
    def geometry(self) -> Optional[Geometry]:
        return self.__geometry

    @geometry.setter
    def geometry(self, geometry: Optional[Geometry]):
        self.__geometry = geometry

    @property
    def id(self) -> int:
        return self.__id

#===============================================================================

class GraphicsChange(NamedTuple):
    kind: str                       # ``add``, ``update`` or ``remove``
    graphics: tuple[Graphic, ...]

ChangeHandler = Callable[[GraphicsChange], None]

#===============================================================================

class EventHandle(object):
    def __init__(self, handlers: list, handler: Callable):
        self.__handlers = handlers
        self.__handler = handler

    def remove(self):
    #================
        if self.__handler in self.__handlers:
            self.__handlers.remove(self.__handler)

#===============================================================================

class GraphicsLayer(object):
    """
    The ordered set of graphics drawn on a map.

    Every method that changes the layer notifies subscribed handlers once,
    after the change has been made, and only if something actually changed.
    """
    def __init__(self):
        self.__graphics: list[Graphic] = []
        self.__handlers: list[ChangeHandler] = []
        self.__log = log.bind(type='layer')

    def __contains__(self, graphic: Graphic) -> bool:
        return graphic in self.__graphics

    def __iter__(self) -> Iterator[Graphic]:
        return iter(list(self.__graphics))

    def __len__(self) -> int:
        return len(self.__graphics)

    @property
    def full_extent(self) -> Optional[Extent]:
        extent = None
        for graphic in self.__graphics:
            if (graphic_extent := getattr(graphic.geometry, 'extent', None)) is None:
                continue
            extent = graphic_extent if extent is None else extent.union(graphic_extent)
        return extent

    @property
    def graphics(self) -> tuple[Graphic, ...]:
        return tuple(self.__graphics)

    def on_graphics_changed(self, handler: ChangeHandler) -> EventHandle:
    #====================================================================
        self.__handlers.append(handler)
        return EventHandle(self.__handlers, handler)

    def add(self, graphic: Graphic):
    #===============================
        self.add_many([graphic])

    def add_many(self, graphics: Iterable[Graphic]):
    #===============================================
        added = tuple(g for g in graphics if g not in self.__graphics)
        if len(added):
            self.__graphics.extend(added)
            self.__notify('add', added)

    def remove(self, graphic: Graphic):
    #==================================
        self.remove_many([graphic])

    def remove_all(self):
    #====================
        self.remove_many(self.__graphics)

    def remove_many(self, graphics: Iterable[Graphic]):
    #==================================================
        removed = tuple(g for g in graphics if g in self.__graphics)
        if len(removed):
            self.__graphics = [g for g in self.__graphics if g not in removed]
            self.__notify('remove', removed)

    def update(self, graphic: Graphic, geometry: Optional[Geometry]):
    #================================================================
        if graphic not in self.__graphics:
            raise ValueError(f'{graphic} is not in the layer')
        graphic.geometry = geometry
        self.__notify('update', (graphic,))

    def __notify(self, kind: str, graphics: tuple[Graphic, ...]):
    #============================================================
        self.__log.debug('Graphics changed', kind=kind, count=len(graphics))
        change = GraphicsChange(kind, graphics)
        for handler in list(self.__handlers):
            handler(change)

#===============================================================================
