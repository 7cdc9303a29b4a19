""" Dependent metadata: the `A < B, B < C` that may precede `::` in a parameter list. """

from ..support.interfaces import MalformedConstraint
from ..support.structures import DependentConstraint

def parse_dependent_metadata(block:str, origin=0) -> list[DependentConstraint]:
	""" `origin` is where the block starts within the signature, for the sake of error reports. """
	constraints = []
	position = 0
	for piece in block.split(','):
		tokens = piece.split()
		if len(tokens) != 3: raise MalformedConstraint(block, position, piece, origin)
		constraints.append(DependentConstraint(*tokens))
		position += len(piece) + 1
	return constraints
