"""Collada (DAE) unit declaration lookup."""

import logging

from lxml import etree

logger = logging.getLogger(__name__)


def read_unit_scale(path: str) -> float:
    """Return the meter-per-unit factor declared in a collada file.

    The value comes from the `meter` attribute of `<asset><unit>`. Files without
    a unit declaration, or with one that does not parse, use 1.0.
    """
    try:
        tree = etree.parse(path)
    except (OSError, etree.XMLSyntaxError) as e:
        logger.error("Failed to read collada file '%s': %s", path, e)
        return 1.0

    # Collada documents are namespaced; match on the local name only.
    units = tree.getroot().xpath("./*[local-name()='asset']/*[local-name()='unit']")
    if not units:
        logger.debug("No unit declaration in '%s'; using scale 1.0", path)
        return 1.0

    meter = units[0].get("meter")
    try:
        return float(meter)
    except (TypeError, ValueError):
        logger.warning("Unparsable unit '%s' in '%s'; using scale 1.0", meter, path)
        return 1.0
