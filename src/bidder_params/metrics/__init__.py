from .prom import LOAD_FAILURES, SCHEMAS_LOADED, mark_failure
