"""
Parse one type token, such as `options:[object]` or `tuple<int;int>`, into a TypeDescriptor.

Macros are not applied here: by the time a token arrives, the caller has already
run it through the type-level macro chain. That keeps this function pure, which
is what makes its results safe to memoize on the token text.
"""

import re

from .subtype import parse_subtype
from ..scanning.symbols import SymbolScanner
from ..support.interfaces import MalformedType
from ..support.structures import TypeDescriptor

WRAPPED = re.compile(r'\[[^\]]+\]')

def name_split(token:str) -> int:
	"""
	Return the offset of the colon that ends a `name:` prefix, or -1 if there isn't one.
	A colon only counts if it comes before any `<`, with something on either side.
	"""
	for i, c in enumerate(token):
		if c == '<': break
		if c == ':': return i if 0 < i < len(token) - 1 else -1
	return -1

def parse_type(token:str) -> TypeDescriptor:
	colon = name_split(token)
	if colon < 0: name, remainder = None, token
	else: name, remainder = token[:colon].strip(), token[colon+1:]
	base = remainder.split('<', 1)[0].replace('[', '').replace(']', '').strip()
	if any(symbol in (';', ',') for symbol in SymbolScanner(base)):
		raise MalformedType("Type %r has a delimiter outside of angle brackets; escape it with %%"%base, token)
	return TypeDescriptor(
		name=name,
		type=base,
		subtype=parse_subtype(remainder),
		optional=WRAPPED.fullmatch(remainder.strip()) is not None,
	)
