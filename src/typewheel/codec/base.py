"""
base.py

PURPOSE: Abstract codec interface.
DEPENDENCIES: None (pure Python + typing)

ARCHITECTURE NOTES:
A codec converts a Component to some external representation and back.
Some codecs are lossless (JSON), others drop information (legacy codes lose
events and fonts, plain text loses all styling). Codecs hold no mutable
state, so one instance can be shared freely.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from typewheel.models.component import Component

EncodedT = TypeVar("EncodedT")


class ComponentCodec(ABC, Generic[EncodedT]):
    """Abstract base class for component codecs."""

    @abstractmethod
    def encode(self, component: Component) -> EncodedT:
        """
        Encode a component.

        Args:
            component: The root of the tree to encode

        Returns:
            The encoded representation
        """
        ...

    @abstractmethod
    def decode(self, value: EncodedT) -> Component:
        """
        Decode a component.

        Args:
            value: An encoded representation

        Returns:
            A newly built component tree
        """
        ...
