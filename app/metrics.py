from prometheus_client import Counter, Histogram
REQUESTS  = Counter("vd_requests_total", "Total requests", ["endpoint","method","status"])
ERRORS    = Counter("vd_errors_total", "Requests that failed inside the service")
LATENCY   = Histogram("vd_request_duration_seconds", "Request latency (s)", buckets=(0.005,0.01,0.025,0.05,0.1,0.2,0.5,1))
DISCOUNTS = Counter("vd_line_discounts_total", "Line discounts emitted")
