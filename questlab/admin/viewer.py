import hmac
import json
import logging

from ..errors import AccessDeniedError

logger = logging.getLogger(__name__)


def dump_store(store, passphrase, expected):
    """Pretty-print the whole stored document if the passphrase matches.

    Nothing is filtered: every account, password included, is shown.
    """
    if not hmac.compare_digest((passphrase or "").encode(), (expected or "").encode()):
        logger.warning("Admin viewer: passphrase rejected")
        raise AccessDeniedError()
    logger.info("Admin viewer: store dumped")
    return json.dumps(store.raw(), indent=2)
