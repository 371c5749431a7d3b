from prometheus_client import Counter, Histogram

SEARCH_REQUESTS = Counter("research_search_requests_total", "Adapter search requests", ["platform"])
SEARCH_ERRORS   = Counter("research_search_errors_total",   "Adapter search errors",   ["platform"])
SEARCH_LATENCY  = Histogram("research_search_request_seconds", "Adapter search latency", ["platform"])
EXTRACTIONS     = Counter("research_extractions_total", "Content extraction outcomes", ["outcome"])
