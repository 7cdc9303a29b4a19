"""
Compose the lower-level parsers into parameter lists and whole signatures.

These functions take the type parser as a parameter. The Parser object supplies
one which applies the type-level macros and consults its memo; tests are free to
supply the bare structural parser from `typetoken`.
"""

import warnings
from typing import Callable

from . import typetoken
from .dependent import parse_dependent_metadata
from ..scanning import splitter
from ..support.interfaces import NO_OUTPUT, MalformedSignature
from ..support.structures import ParameterList, Signature, TypeDescriptor

TypeParser = Callable[[str], TypeDescriptor]

def parse_params(token:str, parse_type:TypeParser=typetoken.parse_type, *, at=0) -> ParameterList:
	"""
	`at` is the offset of the token within its signature, used only for error reports.
	A blank list of types (as in `A < B :: => int`) parses as no types at all.
	"""
	pieces = splitter.split(splitter.is_double_colon, token)
	# The splitter drops a trailing empty piece, but `A < B ::` still has metadata.
	if splitter.ends_with_split(splitter.is_double_colon, token): pieces.append('')
	if len(pieces) > 2: raise MalformedSignature("A parameter list may declare dependent metadata only once", token)
	dependent = parse_dependent_metadata(pieces.pop(0), at) if len(pieces) > 1 else None
	types = splitter.split(splitter.is_comma, pieces[0]) if pieces and pieces[0].strip() else []
	return ParameterList((parse_type(t.strip()) for t in types), dependent)

def split_stages(text:str, *, strict=True) -> list[tuple[int, str]]:
	"""
	Break a signature at its top-level arrows, keeping the offset of each stage.
	A signature needs at least an input stage and an output stage. In strict mode
	anything less is an error; otherwise it's worth a warning, and parsing goes on.
	"""
	stages = splitter.split_with_offsets(splitter.is_arrow, text)
	if len(stages) < 2:
		if strict: raise MalformedSignature(NO_OUTPUT, text)
		warnings.warn(NO_OUTPUT)
	return stages

def parse_signature(text:str, parse_type:TypeParser=typetoken.parse_type, *, strict=True) -> Signature:
	return Signature(parse_params(stage, parse_type, at=at) for at, stage in split_stages(text, strict=strict))
