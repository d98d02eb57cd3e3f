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

from enum import Enum
from typing import Any

#===============================================================================

from geosketch import MAX_ZOOM, MIN_ZOOM

#===============================================================================

class CREATION_MODE(Enum):
    CONTINUOUS = 'continuous'   # Keep the active tool after a shape is completed
    SINGLE     = 'single'

#===============================================================================

# Options of a sketching session, overridden by those given to ``SketchSession``

DEFAULT_OPTIONS: dict[str, Any] = {
    'center': (106.63, 10.82),      # Longitude, latitude
    'minZoom': MIN_ZOOM,
    'maxZoom': MAX_ZOOM,
    'initialZoom': 4,
    'extentMargin': 1.2,
    'indent': 2,
    'restoreProperties': True,
    'creationMode': CREATION_MODE.CONTINUOUS.value,
    'viewSize': (800, 600),         # Pixels
}

# Options that cause logging to be configured
LOGGING_OPTIONS = ['logFile', 'debug', 'silent']

#===============================================================================

def session_options(options: dict[str, Any] | None=None) -> dict[str, Any]:
#=========================================================================
    settings = dict(DEFAULT_OPTIONS)
    if options is not None:
        settings.update({k: v for k, v in options.items() if v is not None})

    min_zoom = settings['minZoom']
    max_zoom = settings['maxZoom']
    initial_zoom = settings['initialZoom']
    if min_zoom < 0 or max_zoom < min_zoom:
        raise ValueError(f'Zoom range must be non-negative and increasing ({min_zoom}, {max_zoom})')
    if initial_zoom < min_zoom or initial_zoom > max_zoom:
        raise ValueError(f'Initial zoom must be between {min_zoom} and {max_zoom}')
    if settings['extentMargin'] <= 0:
        raise ValueError('Extent margin must be positive')
    if settings['creationMode'] not in [mode.value for mode in CREATION_MODE]:
        raise ValueError(f"Unknown creation mode: {settings['creationMode']}")
    if len(settings['center']) != 2 or len(settings['viewSize']) != 2:
        raise ValueError('`center` and `viewSize` must be pairs')
    return settings

#===============================================================================
