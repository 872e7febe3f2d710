"""Retry handling utilities for API calls"""

import time
from typing import Any, Callable

from settings import settings
from .logging import get_logger

logger = get_logger(__name__)


class RetryHandler:
    """Handles retry logic for API calls with exponential backoff"""
    
    @staticmethod
    def execute_with_retry(
        func: Callable[[], Any],
        max_retries: int = settings.GENAI_MAX_RETRIES,
        backoff_factor: float = 2,
        *,
        retry_on: tuple = (Exception,),
        sleep: Callable[[float], None] = time.sleep,
    ) -> Any:
        """Execute function with retry logic
        
        Args:
            func: Zero-argument callable to execute
            max_retries: Maximum number of attempts (at least one)
            backoff_factor: Exponential backoff factor
            retry_on: Exception types that trigger another attempt
            sleep: Sleep function (injectable for tests)
            
        Returns:
            Result from successful function execution
            
        Raises:
            Exception: The last error once all attempts fail
        """
        attempts = max(1, int(max_retries))
        
        for attempt in range(attempts):
            try:
                return func()
            except retry_on as e:
                if attempt < attempts - 1:
                    wait_time = backoff_factor ** attempt
                    logger.warning(f"Attempt {attempt + 1}/{attempts} failed: {e}; retrying in {wait_time}s")
                    sleep(wait_time)
                else:
                    logger.error(f"Maximum retries reached: {e}")
                    raise
