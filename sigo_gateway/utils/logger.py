"""
Logging utilities for the SIGO gateway

Provides centralized logging configuration. Application code logs through
structlog bound to the stdlib loggers configured here, so keyword context
(url, status, preview...) is rendered into every formatted line.
"""

import copy
import os
import logging
import logging.config
from typing import Optional, Dict, Any
import structlog
import yaml

# Default logging configuration
DEFAULT_LOGGING_CONFIG: Dict[str, Any] = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        },
        'detailed': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(process)d - %(threadName)s - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        },
        'json': {
            # structlog renders the event itself as a JSON object
            'format': '{"timestamp": "%(asctime)s", "logger": "%(name)s", "level": "%(levelname)s", "event": %(message)s}',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'INFO',
            'formatter': 'default',
            'stream': 'ext://sys.stdout'
        }
    },
    'loggers': {
        'sigo_gateway': {
            'level': 'INFO',
            'handlers': ['console'],
            'propagate': False
        }
    }
}


def configure_structlog(log_format: Optional[str] = None) -> None:
    """
    Configure structlog on top of the stdlib loggers

    The json format renders each event as a JSON object; the other formats
    render it as key=value pairs after the event text.
    """
    if log_format == 'json':
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.processors.KeyValueRenderer(key_order=['event'])

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.format_exc_info,
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # setup_logging may switch formats after module-level loggers exist
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    """Get a structlog logger bound to the stdlib logger `name`"""
    return structlog.get_logger(name)


configure_structlog()

logger = get_logger(__name__)


def load_logging_config(config_path: Optional[str]) -> Optional[Dict[str, Any]]:
    """Load a dictConfig mapping from a YAML file, or None if unavailable"""
    if not config_path or not os.path.exists(config_path):
        return None

    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load logging config", path=config_path, error=str(e))
        return None

    if not isinstance(config, dict):
        logger.warning("Ignoring logging config: not a mapping", path=config_path)
        return None
    return config


def setup_logging(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    environment: str = 'development'
) -> None:
    """
    Setup logging configuration

    Args:
        config_path: Path to a YAML logging configuration file
        log_level: Override log level
        log_format: Override log format ('default', 'detailed', 'json')
        environment: Selects an environment-specific section of the config
    """
    config = load_logging_config(config_path) or copy.deepcopy(DEFAULT_LOGGING_CONFIG)

    # Apply environment-specific overrides
    env_config = config.pop(environment, None)
    if isinstance(env_config, dict):
        config.setdefault('handlers', {}).update(env_config.get('handlers', {}))
        config.setdefault('loggers', {}).update(env_config.get('loggers', {}))

    if log_level:
        log_level = log_level.upper()
        for logger_config in config.get('loggers', {}).values():
            logger_config['level'] = log_level
        for handler_config in config.get('handlers', {}).values():
            handler_config['level'] = log_level

    if log_format and log_format in config.get('formatters', {}):
        for handler_config in config.get('handlers', {}).values():
            handler_config['formatter'] = log_format

    configure_structlog(log_format)

    try:
        logging.config.dictConfig(config)
    except (ValueError, TypeError, AttributeError, ImportError) as e:
        # Fallback to basic configuration
        logging.basicConfig(
            level=getattr(logging, log_level or 'INFO', logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        logger.error("Failed to configure logging", error=str(e))
        return

    logger.debug("Logging configured", environment=environment)


def init_logging(settings) -> None:
    """Initialize logging from application settings"""
    setup_logging(
        config_path=settings.logging_config_path,
        log_level=settings.log_level,
        log_format=settings.log_format,
        environment=settings.environment.lower()
    )


