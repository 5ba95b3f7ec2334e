"""Enumeration of every possible element."""

from typing import Callable

from otgen.core.contracts import IElement
from otgen.core.features import Feature


class ElementGenerator:
    """Generates each distinct combination of an element's feature values.

    Starting from one all-unset element, each feature in declared order
    fans the working list out by that feature's domain, so the result is
    the Cartesian product of all feature domains.
    """

    def __init__(self, element_factory: Callable[[], IElement]):
        self._element_factory = element_factory

    def elements(self) -> list[IElement]:
        prototype = self._element_factory()
        el_list = [prototype]
        for feature in prototype.each_feature():
            el_list = self._feature_values_product(feature, el_list)
        return el_list

    @staticmethod
    def _feature_values_product(feature: Feature, el_list: list[IElement]) -> list[IElement]:
        product_list = []
        for value in feature.each_value():
            for el in el_list:
                dup = el.clone()
                dup.set_feature(feature.type, value)
                product_list.append(dup)
        return product_list
