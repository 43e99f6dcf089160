# structview/core/gate.py
from __future__ import annotations

import logging
from typing import Any

from structview.contracts.keys import KeyRequest, select_keys
from structview.core.errors import ParametersNotPermitted
from structview.core.parameters import Parameters

logger = logging.getLogger(__name__)


def guarded_deconstruct(parameters: Parameters, keys: KeyRequest) -> dict[Any, Any]:
    """
    Key/value view of a permitted parameter set.

    Unpermitted sets are refused outright, whatever keys were asked for.
    """
    if not parameters.permitted:
        logger.warning("Refused to deconstruct unpermitted parameters")
        raise ParametersNotPermitted()

    data = parameters.to_dict()
    return select_keys(keys, data, data.__getitem__)
