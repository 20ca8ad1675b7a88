# utils/rate_limit.py
import logging
import math
import time

from django.conf import settings
from django.http import HttpResponse
from limits import RateLimitItemPerSecond
from limits.storage import storage_from_string
from limits.strategies import FixedWindowRateLimiter

from utils.validators import client_address

logger = logging.getLogger(__name__)

DEFAULT_MAX_REQUESTS = 200
DEFAULT_WINDOW_SECONDS = 15 * 60
DEFAULT_STORAGE_URI = "memory://"
DEFAULT_MESSAGE = "Too many requests from this IP, please try again later"


class RateLimitMiddleware:
    """
    Fixed-window request limiter keyed by client address.
    With the default memory:// storage, counters are per process and
    expired windows are evicted by the storage.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.storage = storage_from_string(getattr(settings, "RATE_LIMIT_STORAGE_URI", DEFAULT_STORAGE_URI))
        self.limiter = FixedWindowRateLimiter(self.storage)

    def __call__(self, request):
        max_requests = getattr(settings, "RATE_LIMIT_MAX_REQUESTS", DEFAULT_MAX_REQUESTS)
        window = getattr(settings, "RATE_LIMIT_WINDOW_SECONDS", DEFAULT_WINDOW_SECONDS)
        if not max_requests:
            return self.get_response(request)

        address = client_address(request.META, getattr(settings, "RATE_LIMIT_TRUST_FORWARDED", False))
        item = RateLimitItemPerSecond(max_requests, window)
        allowed = self.limiter.hit(item, "ratelimit", address)
        stats = self.limiter.get_window_stats(item, "ratelimit", address)

        if not allowed:
            logger.warning("Rate limit reached for %s (%d requests / %ds)", address, max_requests, window)
            response = HttpResponse(
                getattr(settings, "RATE_LIMIT_MESSAGE", DEFAULT_MESSAGE),
                status=429,
                content_type="text/plain; charset=utf-8",
            )
            response["Retry-After"] = str(max(1, math.ceil(stats.reset_time - time.time())))
            return response

        response = self.get_response(request)
        response["X-RateLimit-Limit"] = str(max_requests)
        response["X-RateLimit-Remaining"] = str(stats.remaining)
        return response
