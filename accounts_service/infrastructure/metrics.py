from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# HTTP
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# Accounts
registrations_total = Counter(
    'account_registrations_total',
    'Account registration attempts',
    ['outcome']
)
logins_total = Counter(
    'account_logins_total',
    'Account login attempts',
    ['outcome']
)

# DB
db_queries_total = Counter('db_queries_total', 'Total database queries')

def metrics_endpoint():
    """Prometheus text exposition of the default registry."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
