import functools
import logging
import os
import re
import commentjson
import yaml
from typing import Union
from python_log_indenter import IndentedLoggerAdapter


class ChartSchemaError(Exception):
    pass


class MalformedTypeGraph(ChartSchemaError):
    pass


class ColorFormatter(logging.Formatter):
    """Colored console formatter with customizable format string"""

    lightgray = "\x1b[1;30m"
    gray = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    def __init__(self, format_string=None, use_colors=True):
        super().__init__()
        self.use_colors = use_colors
        self.format_string = format_string or "%(levelname)s: %(message)s"

        levels = [logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL]
        if self.use_colors:
            colors = [self.lightgray, self.gray, self.yellow, self.red, self.bold_red]
            self.FORMATS = {
                level: color + self.format_string + self.reset
                for level, color in zip(levels, colors)
            }
        else:
            self.FORMATS = {level: self.format_string for level in levels}

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, self.format_string)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


class SimpleFormatter(logging.Formatter):
    """Simple formatter for clean output"""

    def __init__(self, format_string=None):
        super().__init__()
        self.format_string = format_string or "%(message)s"

    def format(self, record):
        formatter = logging.Formatter(self.format_string)
        return formatter.format(record)


class StructuredFormatter(logging.Formatter):
    """Structured JSON formatter for machine-readable logs"""

    def format(self, record):
        import json
        log_record = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_record)

_logger = None
_logger_config = None

def logger(
    level: str = None,
    format_type: str = None,
    format_string: str = None,
    output: str = None,
    filename: str = None,
    use_indentation: bool = None,
    use_colors: bool = None,
    reset: bool = False
) -> logging.Logger:
    """
    Get or create a configurable logger instance.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) - None uses configured
            default, falling back to CHARTSCHEMA_LOG_LEVEL
        format_type: Formatter type ('color', 'simple', 'structured') - None uses configured default
        format_string: Custom format string (overrides format_type)
        output: Output destination ('console', 'file', 'both') - None uses configured default
        filename: Log file path (required if output includes 'file')
        use_indentation: Whether to use IndentedLoggerAdapter - None uses configured default
        use_colors: Force color usage on/off (auto-detect if None)
        reset: Force recreation of logger

    Returns:
        Configured logger instance
    """
    global _logger, _logger_config

    if _logger_config is not None:
        level = level if level is not None else _logger_config.get('level', 'INFO')
        format_type = format_type if format_type is not None else _logger_config.get('format_type', 'color')
        format_string = format_string if format_string is not None else _logger_config.get('format_string', None)
        output = output if output is not None else _logger_config.get('output', 'console')
        filename = filename if filename is not None else _logger_config.get('filename', None)
        use_indentation = use_indentation if use_indentation is not None else _logger_config.get('use_indentation', True)
        use_colors = use_colors if use_colors is not None else _logger_config.get('use_colors', None)
    else:
        level = level if level is not None else os.getenv('CHARTSCHEMA_LOG_LEVEL', 'INFO')
        format_type = format_type if format_type is not None else 'color'
        output = output if output is not None else 'console'
        use_indentation = use_indentation if use_indentation is not None else True

    current_config = {
        'level': level,
        'format_type': format_type,
        'format_string': format_string,
        'output': output,
        'filename': filename,
        'use_indentation': use_indentation,
        'use_colors': use_colors
    }

    if not reset and _logger is not None and _logger_config == current_config:
        return _logger

    # Auto-detect color support if not specified
    if use_colors is None:
        use_colors = hasattr(os.sys.stderr, 'isatty') and os.sys.stderr.isatty()

    log = logging.getLogger("chartschema-log")
    log.propagate = False

    if reset or _logger is not None:
        log.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    log.setLevel(numeric_level)

    if format_string:
        formatter = logging.Formatter(format_string)
    elif format_type == "color":
        formatter = ColorFormatter(use_colors=use_colors)
    elif format_type == "simple":
        formatter = SimpleFormatter()
    elif format_type == "structured":
        formatter = StructuredFormatter()
    else:
        formatter = ColorFormatter(use_colors=use_colors)

    if output in ("console", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        log.addHandler(console_handler)

    if output in ("file", "both"):
        if not filename:
            raise ValueError("filename must be provided when output includes 'file'")
        file_handler = logging.FileHandler(filename)
        file_handler.setLevel(numeric_level)
        # Files get structured records unless a custom format was asked for
        if not format_string and format_type == "color":
            file_formatter = StructuredFormatter()
        else:
            file_formatter = formatter
        file_handler.setFormatter(file_formatter)
        log.addHandler(file_handler)

    if use_indentation:
        _logger = IndentedLoggerAdapter(log)
        _logger.setLevel(numeric_level)
    else:
        _logger = log

    _logger_config = current_config

    return _logger

def set_log_level(level: str):
    """Set the global log level for the chartschema logger"""
    global _logger, _logger_config
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    if _logger is not None:
        if _logger_config:
            _logger_config['level'] = level.upper()

        underlying_logger = _logger.logger if hasattr(_logger, 'logger') else _logger
        underlying_logger.setLevel(numeric_level)

        for handler in underlying_logger.handlers:
            handler.setLevel(numeric_level)

        if hasattr(_logger, 'setLevel'):
            _logger.setLevel(numeric_level)
    else:
        logger(level=level.upper())

def expand_env_vars(text: str) -> str:
    """Expand environment variables with support for ${VAR:-default} syntax."""

    def replacer(match):
        var_expr = match.group(1)
        if ':-' in var_expr:
            var_name, default_value = var_expr.split(':-', 1)
            default_value = default_value.strip('\'"')
            return os.environ.get(var_name, default_value)
        else:
            return os.environ.get(var_expr, match.group(0))

    text = re.sub(r'\$\{([^}]+)\}', replacer, text)
    text = os.path.expandvars(text)
    return text

def loads(data: str, expand_env: bool = False):
    """Parse JSON text, allowing comments."""
    if expand_env:
        data = expand_env_vars(data)
    return commentjson.loads(data)

def loadjson(filename, expand_env: bool = False):
    with open(filename, encoding='utf-8') as f:
        data = f.read()
    try:
        return loads(data, expand_env)
    except Exception as e:
        logger().error(f"Could not parse JSON from {filename}: {e}")
        raise

def loadyaml(filename, expand_env: bool = False):
    with open(filename, encoding='utf-8') as f:
        data = f.read()
    if expand_env:
        data = expand_env_vars(data)
    try:
        return yaml.safe_load(data)
    except yaml.YAMLError as e:
        logger().error(f"Could not parse YAML from {filename}: {e}")
        raise

def loadfile(filename, expand_env: bool = False):
    """Load a JSON or YAML document, picking the parser from the extension"""
    ext = os.path.splitext(str(filename))[1].lower()
    if ext in (".yaml", ".yml"):
        return loadyaml(filename, expand_env)
    if ext == ".json":
        return loadjson(filename, expand_env)
    raise ValueError(f"Unsupported document type: {filename}")

def get_default_logger():
    return logger()

def log(_func=None, *, my_logger: Union[logging.Logger, IndentedLoggerAdapter] = None):
    def decorator_log(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            log_to = my_logger if my_logger is not None else get_default_logger()
            args_repr = [repr(a) for a in args]
            kwargs_repr = [f"{k}={v!r}" for k, v in kwargs.items()]
            signature = ", ".join(args_repr + kwargs_repr)
            log_to.debug(f"function {func.__name__} called with args {signature}")
            try:
                return func(*args, **kwargs)
            except Exception as e:
                log_to.exception(f"Exception raised in {func.__name__}. exception: {str(e)}")
                raise
        return wrapper

    if _func is None:
        return decorator_log
    else:
        return decorator_log(_func)
