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

from datetime import datetime, timezone
import json
import os
from typing import Any, Iterable, Optional

#===============================================================================

from geosketch.geometry import MapPoint, Polyline, Reprojector
from geosketch.surface import Graphic
from geosketch.utils import log, set_as_list

#===============================================================================

GEOJSON_MEDIA_TYPE = 'application/vnd.geo+json'

#===============================================================================

def pretty(obj: Any, indent: int=2) -> str:
#==========================================
    return json.dumps(obj, indent=indent, default=set_as_list)

#===============================================================================

class GeoJSONOutput(object):
    def __init__(self, reprojector: Reprojector, indent: int=2):
        self.__reprojector = reprojector
        self.__indent = indent

    def feature_collection(self, graphics: Iterable[Graphic]) -> dict[str, Any]:
    #===========================================================================
        features = []
        for graphic in graphics:
            features.extend(self.features(graphic))
        return {
            'type': 'FeatureCollection',
            'features': features
        }

    def features(self, graphic: Graphic) -> list[dict[str, Any]]:
    #============================================================
        """
        The GeoJSON features of a graphic, in WGS84.

        A point gives a single ``Point`` feature and a polyline gives a
        ``LineString`` feature for each of its paths that has at least two
        points. Features from the same graphic share its attributes. Graphics
        without geometry or with some other kind of geometry have no features.
        """
        geometry = graphic.geometry
        if not isinstance(geometry, (MapPoint, Polyline)):
            return []
        properties = dict(graphic.attributes)
        geographic = self.__reprojector.to_geographic(geometry)
        if isinstance(geographic, MapPoint):
            return [{
                'type': 'Feature',
                'properties': properties,
                'geometry': {
                    'type': 'Point',
                    'coordinates': [geographic.x, geographic.y]
                }
            }]
        features = []
        for path in geographic.paths:
            if len(path) >= 2:
                features.append({
                    'type': 'Feature',
                    'properties': properties,
                    'geometry': {
                        'type': 'LineString',
                        'coordinates': [[x, y] for (x, y) in path]
                    }
                })
        return features

    def text(self, graphics: Iterable[Graphic]) -> str:
    #==================================================
        return pretty(self.feature_collection(graphics), self.__indent)

#===============================================================================

class GeoJSONDownload(object):
    def __init__(self, text: str, timestamp: Optional[datetime]=None):
        if timestamp is None:
            timestamp = datetime.now(timezone.utc)
        self.__text = text
        self.__filename = f'features-{int(timestamp.timestamp()*1000)}.geojson'

    @property
    def filename(self) -> str:
        return self.__filename

    @property
    def media_type(self) -> str:
        return GEOJSON_MEDIA_TYPE

    @property
    def text(self) -> str:
        return self.__text

    def save(self, directory: str) -> str:
    #=====================================
        if not os.path.exists(directory):
            os.makedirs(directory)
        path = os.path.join(directory, self.__filename)
        with open(path, 'w', encoding='utf-8') as output_file:
            output_file.write(self.__text)
        log.info('Saved GeoJSON', path=path, media_type=self.media_type)
        return path

#===============================================================================
