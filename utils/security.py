"""
Security Module - Password hashing, client IP lookup and rate limiting
"""

import threading
import time
from flask import request, current_app
from werkzeug.security import generate_password_hash, check_password_hash


# Compared against when a login email is unknown, so both failure paths
# do the same amount of hashing work
_DUMMY_PASSWORD_HASH = None


def hash_password(password):
    return generate_password_hash(password)


def verify_password(password, password_hash):
    """Verify password against hash; a missing hash never matches"""
    global _DUMMY_PASSWORD_HASH
    if not password_hash:
        if _DUMMY_PASSWORD_HASH is None:
            _DUMMY_PASSWORD_HASH = generate_password_hash('dummy-password-for-timing')
        check_password_hash(_DUMMY_PASSWORD_HASH, password or '')
        return False
    return check_password_hash(password_hash, password or '')


def get_client_ip():
    """
    Address of the connecting peer.

    Forwarded headers are only trusted through ProxyFix (PROXY_FIX_X_FOR),
    which rewrites remote_addr before this runs.
    """
    return request.remote_addr or 'unknown'


class RateLimiter:
    """Sliding-window request counter keyed by (client ip, endpoint)"""

    def __init__(self, max_requests=10, window=60, clock=time.monotonic):
        self.max_requests = max_requests
        self.window = window
        self.clock = clock
        self._requests = {}  # {(ip, endpoint): [timestamp, ...]}
        self._last_sweep = None
        self._lock = threading.Lock()

    def hit(self, key, endpoint='contact'):
        """Record a request; return False when the limit is already reached"""
        now = self.clock()
        bucket_key = (key, endpoint)
        with self._lock:
            self._sweep(now)
            # Clean old requests outside the window
            recent = [ts for ts in self._requests.get(bucket_key, []) if now - ts < self.window]
            if len(recent) >= self.max_requests:
                self._requests[bucket_key] = recent
                return False
            recent.append(now)
            self._requests[bucket_key] = recent
            return True

    def _sweep(self, now):
        """Drop buckets with no request inside the window, at most once per window"""
        if self._last_sweep is not None and now - self._last_sweep < self.window:
            return
        self._last_sweep = now
        stale = [k for k, stamps in self._requests.items() if not stamps or now - stamps[-1] >= self.window]
        for k in stale:
            del self._requests[k]


def check_rate_limit(endpoint='contact'):
    """Check if the current client IP is within rate limit"""
    limiter = current_app.extensions['rate_limiter']
    allowed = limiter.hit(get_client_ip(), endpoint)
    if not allowed:
        current_app.logger.warning(f"Rate limit exceeded for {get_client_ip()} on {endpoint}")
    return allowed


__all__ = [
    'hash_password',
    'verify_password',
    'get_client_ip',
    'RateLimiter',
    'check_rate_limit'
]
