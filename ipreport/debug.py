"""
Debug utilities for ipreport.

This module provides diagnostic output for outbound service calls,
interface enumeration and configuration when debug mode is enabled.
Diagnostics go to stderr so they never mix with report output.
"""

import sys
import time
import json
from typing import Any, Dict, Optional, Callable
from functools import wraps
from .config import config


class DebugLogger:
    """Debug logger for low-level diagnostics."""

    def __init__(self):
        """Initialize debug logger."""
        self.start_time = time.time()
        self.request_count = 0

    def log(self, level: str, message: str, data: Optional[Dict[str, Any]] = None):
        """
        Log debug message with optional data.

        Args:
            level: Debug level ('basic', 'detailed', 'verbose')
            message: Debug message
            data: Optional data to include
        """
        if not config.is_debug_mode():
            return

        current_level = config.get_debug_level()

        level_hierarchy = {'basic': 0, 'detailed': 1, 'verbose': 2}
        if level_hierarchy.get(level, 0) > level_hierarchy.get(current_level, 0):
            return

        timestamp = time.time() - self.start_time
        prefix = f"[DEBUG +{timestamp:.3f}s]"

        print(f"{prefix} {message}", file=sys.stderr)

        if data and current_level in ('detailed', 'verbose'):
            self._print_data(data, current_level)

    def _print_data(self, data: Dict[str, Any], level: str):
        """Print debug data with appropriate formatting."""
        try:
            if level == 'verbose':
                formatted = json.dumps(data, indent=2, default=str)
                for line in formatted.split('\n'):
                    print(f"[DEBUG]   {line}", file=sys.stderr)
            else:
                for key, value in data.items():
                    if isinstance(value, dict):
                        print(f"[DEBUG]   {key}: {len(value)} items", file=sys.stderr)
                    elif isinstance(value, list):
                        print(f"[DEBUG]   {key}: [{len(value)} items]", file=sys.stderr)
                    elif isinstance(value, str) and len(value) > 100:
                        print(f"[DEBUG]   {key}: '{value[:97]}...'", file=sys.stderr)
                    else:
                        print(f"[DEBUG]   {key}: {value}", file=sys.stderr)
        except (TypeError, ValueError):
            print("[DEBUG]   <data formatting error>", file=sys.stderr)

    def log_source_call(self, source_name: str, method: str, args: tuple = ()):
        """Log an outbound source call."""
        self.request_count += 1
        call_args = ", ".join(str(arg) for arg in args)
        self.log('basic', f"Request #{self.request_count}: {source_name}.{method}({call_args})")

    def log_source_result(self, source_name: str, method: str, result: Any, execution_time: float):
        """Log an outbound source result."""
        self.log('basic', f"Result: {source_name}.{method} -> {self._summarize_result(result)} "
                          f"({execution_time:.3f}s)")

        if result is not None:
            self.log('detailed', f"Full result data for {source_name}.{method}:",
                     {'result': getattr(result, '__dict__', result)})

    def log_source_error(self, source_name: str, method: str, error: Exception, execution_time: float):
        """Log an outbound source error."""
        error_type = type(error).__name__
        error_msg = str(error)[:100]

        self.log('basic', f"Error: {source_name}.{method} -> {error_type}: {error_msg} ({execution_time:.3f}s)")

    def _summarize_result(self, result: Any) -> str:
        """Create a summary of the result for logging."""
        if result is None:
            return "None"
        elif isinstance(result, dict):
            return f"dict({len(result)} keys)"
        elif isinstance(result, str):
            return f"str({len(result)} chars)"
        else:
            return type(result).__name__

    def log_interfaces(self, interfaces: Dict[str, list]):
        """Log the raw interface table returned by the operating system."""
        self.log('basic', f"Enumerated {len(interfaces)} interfaces")
        self.log('verbose', "Interface table:", interfaces)

    def log_config_info(self):
        """Log current configuration in debug mode."""
        if not config.is_debug_mode():
            return

        debug_info = {
            'debug_level': config.get_debug_level(),
            'public_ip_url': config.get_endpoint_url('public_ip'),
            'lookup_url': config.get_endpoint_url('lookup'),
            'request_timeout': config.get_request_timeout(),
            'interface_policy': config.get_interface_policy(),
        }

        self.log('detailed', "Current configuration:", debug_info)


def debug_source_method(func: Callable) -> Callable:
    """
    Decorator to add debug logging to source methods.

    Logs the call, its result or error, and the elapsed time
    when debug mode is enabled.
    """
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        if not config.is_debug_mode():
            return func(self, *args, **kwargs)

        source_name = getattr(self, 'name', self.__class__.__name__)
        method_name = func.__name__

        debug_logger.log_source_call(source_name, method_name, args)

        start_time = time.time()
        try:
            result = func(self, *args, **kwargs)
            debug_logger.log_source_result(source_name, method_name, result, time.time() - start_time)
            return result
        except Exception as e:
            debug_logger.log_source_error(source_name, method_name, e, time.time() - start_time)
            raise

    return wrapper


# Global debug logger instance
debug_logger = DebugLogger()
