# topmark:header:start
#
#   project      : PaddedCell
#   file         : factory.py
#   file_relpath : src/paddedcell/formatter/factory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build chains from configuration.

Keeps the config layer free of step imports: `FormatConfig` only holds step
specs, and this module resolves them through the step registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from paddedcell.config.logging import get_logger
from paddedcell.core.errors import ConfigError
from paddedcell.formatter.chain import Chain
from paddedcell.steps.registry import StepRegistry

if TYPE_CHECKING:
    from paddedcell.config.logging import PaddedCellLogger
    from paddedcell.config.model import FormatConfig
    from paddedcell.steps.contracts import Step

logger: PaddedCellLogger = get_logger(__name__)


def build_chain(fmt: FormatConfig) -> Chain:
    """Build the `Chain` described by a format configuration.

    Args:
        fmt (FormatConfig): The format configuration.

    Returns:
        Chain: The chain, with steps in configured order.

    Raises:
        ConfigError: If a step type is unknown or its options are invalid.
    """
    steps: list[Step] = []
    for index, spec in enumerate(fmt.steps):
        try:
            steps.append(StepRegistry.build(spec))
        except ConfigError as exc:
            raise ConfigError(f"format '{fmt.name}', step #{index + 1}: {exc}") from exc
    chain = Chain(
        name=fmt.name,
        steps=tuple(steps),
        line_ending=fmt.line_ending,
        ensure_trailing_newline=fmt.ensure_trailing_newline,
    )
    logger.debug(
        "Built chain '%s' with %d step(s): %s",
        chain.name,
        len(chain.steps),
        ", ".join(s.name for s in chain.steps) or "-",
    )
    return chain
