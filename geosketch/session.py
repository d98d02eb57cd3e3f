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

from typing import Any, Callable, Optional

#===============================================================================

from . import __version__
from .clipboard import Clipboard, ClipboardError
from .geometry import Reprojector, finite
from .output import GeoJSONDownload, GeoJSONOutput
from .settings import LOGGING_OPTIONS, session_options
from .sources import GeoJSONError, GeoJSONSource, ImportResult
from .surface import ClickEvent, Graphic, GraphicsChange, GraphicsLayer
from .surface import MapView, SketchTool, ZoomConstraints
from .utils import configure_logging, log, reset_logging

#===============================================================================

INVALID_JSON_ALERT = 'Invalid JSON'
COPIED_ALERT = 'Copied GeoJSON!'
NO_CLIPBOARD_ALERT = 'Clipboard unavailable in this context.'

#===============================================================================

def zoom_value(value: Any) -> Optional[float]:
#=============================================
    """
    The numeric value of a zoom input, or ``None`` if it is blank or not a
    number.
    """
    if isinstance(value, str):
        value = value.strip()
        if value == '':
            return None
        try:
            value = float(value)
        except ValueError:
            return None
    return float(value) if finite(value) else None

#===============================================================================

class SketchSession(object):
    """
    A map with a sketching layer whose graphics are kept in step with
    their GeoJSON text.

    The session holds what a user interface shows: ``text`` is always the
    exported FeatureCollection of the layer's graphics, unless it has been
    edited for loading. Messages for the user are passed to ``alert``.
    """
    def __init__(self, options: Optional[dict[str, Any]]=None,
                       alert: Optional[Callable[[str], None]]=None,
                       clipboard: Optional[Clipboard]=None):
        options = session_options(options)
        self.__logging = any(options.get(option) for option in LOGGING_OPTIONS)
        if self.__logging:
            configure_logging(options.get('logFile'),
                silent=options.get('silent', False),
                debug=options.get('debug', False))
        self.__log = log.bind(type='session')
        self.__log.debug('Sketch session', version=__version__)
        self.__options = options
        self.__alert = alert if alert is not None else self.__log_alert
        self.__clipboard = clipboard if clipboard is not None else Clipboard()

        self.__reprojector = Reprojector()
        self.__layer = GraphicsLayer()
        self.__view = MapView(options['center'], options['initialZoom'],
                              ZoomConstraints(options['minZoom'], options['maxZoom']),
                              size=options['viewSize'])
        self.__sketch = SketchTool(self.__layer, options['creationMode'])
        self.__output = GeoJSONOutput(self.__reprojector, indent=options['indent'])
        self.__source = GeoJSONSource(self.__reprojector,
                                      restore_properties=options['restoreProperties'])

        self.__click_handle = None
        self.__layer_handle = self.__layer.on_graphics_changed(self.__graphics_changed)
        self.__text = ''
        self.refresh_export()

    @property
    def click_mode(self) -> bool:
        return self.__click_handle is not None

    @click_mode.setter
    def click_mode(self, enabled: bool):
        if enabled and self.__click_handle is None:
            self.__click_handle = self.__view.on_click(self.__map_clicked)
        elif not enabled and self.__click_handle is not None:
            self.__click_handle.remove()
            self.__click_handle = None

    @property
    def layer(self) -> GraphicsLayer:
        return self.__layer

    @property
    def options(self) -> dict[str, Any]:
        return self.__options

    @property
    def reprojector(self) -> Reprojector:
        return self.__reprojector

    @property
    def sketch(self) -> SketchTool:
        return self.__sketch

    @property
    def text(self) -> str:
        return self.__text

    @text.setter
    def text(self, text: str):
        self.__text = text

    @property
    def view(self) -> MapView:
        return self.__view

    def apply_zoom_constraints(self, min_zoom: Any, max_zoom: Any, start_zoom: Any=None) -> bool:
    #============================================================================================
        """
        Constrain the view's zoom range and set its zoom level.

        Nothing is changed if either limit isn't a number or the minimum is
        greater than the maximum. A start zoom that isn't a number defaults to
        the middle of the range, otherwise it is clamped into the range.

        :returns: ``True`` if the constraints were applied
        """
        min_z = zoom_value(min_zoom)
        max_z = zoom_value(max_zoom)
        if min_z is None or max_z is None or min_z > max_z:
            self.__log.debug('Zoom constraints ignored', min_zoom=min_zoom, max_zoom=max_zoom)
            return False
        start_z = zoom_value(start_zoom)
        if start_z is None:
            start_z = (min_z + max_z)/2
        start_z = min(max(start_z, min_z), max_z)
        self.__view.constraints = self.__view.constraints._replace(min_zoom=min_z, max_zoom=max_z)
        self.__view.zoom = start_z
        self.__log.info('Zoom constraints applied', min_zoom=min_z, max_zoom=max_z, zoom=start_z)
        return True

    def clear_all(self):
    #===================
        self.__layer.remove_all()
        self.refresh_export()
        self.__log.info('Cleared graphics')

    def close(self):
    #===============
        self.click_mode = False
        self.__layer_handle.remove()
        if self.__logging:
            reset_logging()

    def copy_to_clipboard(self) -> bool:
    #===================================
        try:
            self.__clipboard.write_text(self.__text)
        except ClipboardError as error:
            self.__log.warning('Cannot copy to clipboard', error=str(error))
            self.__alert(NO_CLIPBOARD_ALERT)
            return False
        self.__alert(COPIED_ALERT)
        return True

    def download(self, directory: str='.') -> str:
    #=============================================
        return GeoJSONDownload(self.__text).save(directory)

    def export_features(self) -> dict[str, Any]:
    #===========================================
        return self.__output.feature_collection(self.__layer)

    def load(self, text: Optional[str]=None) -> Optional[ImportResult]:
    #==================================================================
        """
        Replace the layer's graphics with those from GeoJSON text.

        :param text: the GeoJSON to load, defaulting to the session's ``text``
        :returns: the number of graphics created and features skipped, or
                  ``None`` if the text isn't valid JSON, in which case the
                  user is alerted and nothing is changed
        """
        if text is None:
            text = self.__text
        try:
            result = self.__source.load(text, self.__layer)
        except GeoJSONError as error:
            self.__log.warning('Cannot load GeoJSON', error=str(error))
            self.__alert(INVALID_JSON_ALERT)
            return None
        if result.created and (extent := self.__layer.full_extent) is not None:
            self.__view.go_to(extent.expand(self.__options['extentMargin']))
        self.refresh_export()
        return result

    def refresh_export(self) -> str:
    #===============================
        self.__text = self.__output.text(self.__layer)
        return self.__text

    def __graphics_changed(self, change: GraphicsChange):
    #====================================================
        self.refresh_export()

    def __log_alert(self, message: str):
    #===================================
        self.__log.warning(message)

    def __map_clicked(self, event: ClickEvent):
    #==========================================
        geographic = self.__reprojector.to_geographic(event.map_point)
        self.__layer.add(Graphic(event.map_point,
                                 {'lon': geographic.x, 'lat': geographic.y}))

#===============================================================================
