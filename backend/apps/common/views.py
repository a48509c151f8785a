import os
import time

import redis as redis_lib
from django.core.cache import cache
from django.db import connections
from django.db.utils import OperationalError
from django.http import JsonResponse

from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')

_CACHE_PROBE_KEY = 'health:session-cache-probe'


def _redis_ping(url: str, timeout: float = 0.3):
    try:
        client = redis_lib.from_url(url, socket_connect_timeout=timeout, socket_timeout=timeout)
        pong = client.ping()
    except Exception as e:  # pragma: no cover - network dependent
        logger.warning('Redis health check failed', error=str(e))
        return {'status': 'fail', 'error': str(e)}
    if not pong:
        logger.warning('Redis health check returned unexpected response')
        return {'status': 'fail'}
    return {'status': 'ok'}


def _db_check(alias='default'):
    started = time.time()
    try:
        conn = connections[alias]
        conn.cursor().execute('SELECT 1')
    except OperationalError as e:
        logger.warning('Database health check encountered operational error', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    except Exception as e:
        logger.error('Database health check failed unexpectedly', alias=alias, error=str(e), exception=e.__class__.__name__)
        return {'status': 'fail', 'error': str(e), 'exception': e.__class__.__name__}
    latency = round((time.time() - started) * 1000, 2)
    return {'status': 'ok', 'latency_ms': latency}


def _session_cache_check():
    # The cache backend fails open, so a silent miss is reported as degraded.
    token = str(time.time())
    cache.set(_CACHE_PROBE_KEY, token, 5)
    if cache.get(_CACHE_PROBE_KEY) != token:
        logger.warning('Session cache round-trip failed')
        return {'status': 'fail', 'detail': 'cache round-trip mismatch'}
    return {'status': 'ok'}


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: session storage (database, cache, Redis) must be usable."""
    checks = {
        'database': _db_check(),
        'cache': _session_cache_check(),
    }
    redis_url = os.getenv('REDIS_URL')
    if redis_url:
        checks['redis'] = _redis_ping(redis_url)
    else:
        checks['redis'] = {'status': 'skipped', 'detail': 'REDIS_URL not set'}

    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse(
        {'status': overall_status, 'checks': checks},
        status=200 if not failing else 503,
    )
