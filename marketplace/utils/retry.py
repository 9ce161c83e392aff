# marketplace/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import requests

from marketplace.utils.settings import IMAGE_RESOLVE_ATTEMPTS


def http_retry(attempts: int = IMAGE_RESOLVE_ATTEMPTS):
    # attempts=1 -> jedna proba, bez ponowien
    return retry(
        reraise=True,
        stop=stop_after_attempt(max(1, attempts)),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type(requests.RequestException),
    )
