"""Id generation for stored collections."""

import logging
import time

logger = logging.getLogger(__name__)


def new_id(taken):
    """Return a millisecond timestamp id not present in ``taken``."""
    candidate = int(time.time() * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


def drop_duplicate_ids(records, key):
    """Keep the first record for each id, logging the ones dropped."""
    seen = set()
    unique = []
    for record in records:
        if record.id in seen:
            logger.warning('Dropping record with duplicate id %s under %r', record.id, key)
            continue
        seen.add(record.id)
        unique.append(record)
    return unique
