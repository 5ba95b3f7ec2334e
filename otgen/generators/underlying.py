"""Enumeration of underlying forms of a given length."""

from otgen.core.contracts import IElementSource
from otgen.core.forms import UnderlyingForm
from otgen.errors import InvalidLength
from otgen.observ import get_logger, timed

logger = get_logger(__name__)


class UnderlyingFormGenerator:
    """All underlying forms of ``length`` elements.

    Every element is the unit that stands in correspondence across
    underlying, input and output forms (a syllable, for instance).
    """

    def __init__(self, element_source: IElementSource):
        self._element_source = element_source

    @timed(logger)
    def underlying_forms(self, length: int) -> list[UnderlyingForm]:
        if length < 0:
            raise InvalidLength(length)

        uf_list = [UnderlyingForm()]
        for _ in range(length):
            uf_list = self._extend(uf_list)

        logger.debug("underlying_forms_generated", length=length, count=len(uf_list))
        return uf_list

    def _extend(self, uf_list: list[UnderlyingForm]) -> list[UnderlyingForm]:
        """One copy of each form per possible element, extended by it."""
        elements = self._element_source.elements()
        return [uf.extended(el) for uf in uf_list for el in elements]
