"""
The values a parse produces. They know nothing of the parser that made them.

A TypeDescriptor and a DependentConstraint are NamedTuples, so they compare by
value. A ParameterList is an ordinary list of TypeDescriptor which additionally
carries its dependent metadata, and a Signature is a list of ParameterList.
Subtype lists are plain lists: the caller owns whatever it receives.
"""

from typing import NamedTuple, Optional

class TypeDescriptor(NamedTuple):
	name: Optional[str]
	type: str
	subtype: list
	optional: bool

	def as_data(self) -> dict:
		return {'name': self.name, 'type': self.type, 'subtype': list(self.subtype), 'optional': self.optional}

class DependentConstraint(NamedTuple):
	""" One relation between named parameters, such as `A < B`. The operator is opaque text. """
	left: str
	operator: str
	right: str

	def as_data(self) -> dict:
		return {'left': self.left, 'operator': self.operator, 'right': self.right}

class ParameterList(list):
	""" The types of one stage, plus `dependent`: None or a list of DependentConstraint. """

	def __init__(self, types=(), dependent=None):
		super().__init__(types)
		self.dependent = dependent

	def __eq__(self, other):
		if isinstance(other, ParameterList) and self.dependent != other.dependent: return False
		return super().__eq__(other)

	def __ne__(self, other):
		equal = self.__eq__(other)
		return equal if equal is NotImplemented else not equal

	__hash__ = None

	def __repr__(self):
		return "ParameterList(%s, dependent=%r)"%(super().__repr__(), self.dependent)

	def as_data(self) -> dict:
		dependent = None if self.dependent is None else [c.as_data() for c in self.dependent]
		return {'types': [t.as_data() for t in self], 'dependent': dependent}

class Signature(list):
	""" One ParameterList per arrow-separated stage; the last one is the output. """

	def __repr__(self):
		return "Signature(%s)"%super().__repr__()

	def as_data(self) -> list:
		return [stage.as_data() for stage in self]
