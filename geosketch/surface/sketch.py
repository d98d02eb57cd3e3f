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

from typing import Iterable, Optional

#===============================================================================

from geosketch.geometry import MapPoint, Polyline
from geosketch.geometry.shapes import Coordinate, Geometry
from geosketch.settings import CREATION_MODE
from geosketch.utils import log

from .graphics import Graphic, GraphicsLayer

#===============================================================================

# Only points and lines can be drawn
CREATE_TOOLS = ['point', 'polyline']

#===============================================================================

class SketchTool(object):
    """
    Interactive creation, editing and deletion of graphics in a layer.

    Vertices are given in the display projection. Shapes are added to the
    layer when they are completed, so the layer's change notification is
    the only event a client needs to observe.
    """
    def __init__(self, layer: GraphicsLayer, creation_mode: str=CREATION_MODE.CONTINUOUS.value):
        self.__layer = layer
        self.__creation_mode = CREATION_MODE(creation_mode)
        self.__active_tool: Optional[str] = None
        self.__paths: list[list[Coordinate]] = []
        self.__log = log.bind(type='sketch')

    @property
    def active_tool(self) -> Optional[str]:
        return self.__active_tool

    @property
    def creation_mode(self) -> CREATION_MODE:
        return self.__creation_mode

    @property
    def layer(self) -> GraphicsLayer:
        return self.__layer

    def add_vertex(self, x: float, y: float):
    #========================================
        if self.__active_tool is None:
            raise ValueError('No sketch tool is active')
        if self.__active_tool == 'point':
            self.__paths = [[(x, y)]]
        else:
            self.__paths[-1].append((x, y))

    def cancel(self):
    #================
        self.__active_tool = None
        self.__paths = []

    def complete(self) -> Graphic:
    #=============================
        if self.__active_tool == 'point':
            if len(self.__paths) == 0:
                raise ValueError('A point needs a location')
            geometry: Geometry = MapPoint(*self.__paths[0][0])
        elif self.__active_tool == 'polyline':
            if not any(len(path) >= 2 for path in self.__paths):
                raise ValueError('A polyline needs a path with at least two vertices')
            geometry = Polyline([path for path in self.__paths if len(path)])
        else:
            raise ValueError('No sketch tool is active')
        graphic = Graphic(geometry)
        tool = self.__active_tool
        self.__paths = []
        if self.__creation_mode == CREATION_MODE.CONTINUOUS:
            self.create(tool)
        else:
            self.__active_tool = None
        self.__layer.add(graphic)
        self.__log.debug('Created graphic', tool=tool, id=graphic.id)
        return graphic

    def create(self, tool: str):
    #===========================
        if tool not in CREATE_TOOLS:
            raise ValueError(f'Unknown sketch tool: {tool}')
        self.__active_tool = tool
        self.__paths = [[]] if tool == 'polyline' else []

    def delete(self, graphics: Iterable[Graphic]):
    #=============================================
        self.__layer.remove_many(graphics)

    def new_path(self):
    #==================
        if self.__active_tool != 'polyline':
            raise ValueError('Only polylines have multiple paths')
        if len(self.__paths[-1]):
            self.__paths.append([])

    def place_point(self, x: float, y: float) -> Graphic:
    #====================================================
        if self.__active_tool != 'point':
            self.create('point')
        self.add_vertex(x, y)
        return self.complete()

    def update(self, graphic: Graphic, geometry: Geometry):
    #======================================================
        self.__layer.update(graphic, geometry)

#===============================================================================
