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

import json
import logging
from typing import Any, Callable, Optional

#===============================================================================

import structlog
from structlog.typing import EventDict, WrappedLogger

#===============================================================================

class RenameJSONRenderer:
    def __init__(self,
      to: str, replace_by: str | None = None,
      serializer: Callable[..., str | bytes] = json.dumps, **dumps_kw: Any):
        self.__renamer = structlog.processors.EventRenamer(to, replace_by)
        self.__json_renderer = structlog.processors.JSONRenderer(serializer, **dumps_kw)

    def __call__(self, logger: WrappedLogger, name: str, event_dict: EventDict) -> str | bytes:
        return self.__json_renderer(logger, name, self.__renamer(logger, name, event_dict))

#===============================================================================

def configure_structlog():
#========================
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

#===============================================================================

_console_handler: Optional[logging.Handler] = None
_json_handler: Optional[logging.Handler] = None

def configure_logging(log_json_file=None, silent=False, debug=False) -> Optional[logging.FileHandler]:
#===================================================================================================
    global _console_handler, _json_handler

    log_level = logging.DEBUG if debug else logging.INFO

    # Get our logger and remove handlers from any previous configuration
    reset_logging()
    logger = logging.getLogger('geosketch')
    logger.setLevel(log_level)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.CRITICAL if silent else log_level)
    stream_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=True)
        ],
    ))
    logger.addHandler(stream_handler)
    _console_handler = stream_handler

    # Log as JSON to a file if requested
    json_handler = None
    if log_json_file is not None:
        json_handler = logging.FileHandler(log_json_file)
        json_handler.setLevel(log_level)
        json_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                RenameJSONRenderer('msg')
            ],
        ))
        logger.addHandler(json_handler)
    _json_handler = json_handler

    configure_structlog()

    return json_handler

def reset_logging():
#==================
    global _console_handler, _json_handler

    logger = logging.getLogger('geosketch')
    for handler in (_console_handler, _json_handler):
        if handler is not None:
            logger.removeHandler(handler)
            handler.close()
    _console_handler = None
    _json_handler = None
    logger.setLevel(logging.NOTSET)

#===============================================================================

# Messages go nowhere until ``configure_logging()`` adds handlers
logging.getLogger('geosketch').addHandler(logging.NullHandler())
configure_structlog()

log: structlog.BoundLogger = structlog.get_logger('geosketch')

#===============================================================================
