"""
Pull the subtypes out of a type token such as `tuple<string; tuple<string;int>>`.

The interior of the outermost angle brackets is split on `;` or `,` wherever
those appear at the top level. Each piece is then cleaned up at its own top
level only: whitespace there is insignificant and disappears, while an escape
such as `%;` becomes the literal character. Inside deeper brackets the text is
left exactly as written, so that `tuple<string; int>` stays a type token which
can be parsed again later, escapes and all.
"""

import re

from ..scanning import splitter
from ..scanning.symbols import SymbolScanner, is_escape

OPTIONAL_WRAPPER = re.compile(r'\s*\[(.*)\]\s*', re.DOTALL)

def strip_optional(raw_type:str) -> str:
	match = OPTIONAL_WRAPPER.fullmatch(raw_type)
	return raw_type if match is None else match.group(1)

def generic_interior(raw_type:str) -> str:
	""" Everything after the first `<`, less one trailing `>`; None if there is no `<` at all. """
	content = strip_optional(raw_type).rstrip()
	head, bracket, interior = content.partition('<')
	if not bracket: return None
	return interior[:-1] if interior.endswith('>') else interior

def normalize(piece:str) -> str:
	out = []
	yy = SymbolScanner(piece)
	for symbol in yy:
		at_top = yy.depth == 0 or (yy.depth == 1 and symbol == '<')
		if not at_top: out.append(symbol)
		elif is_escape(symbol): out.append(symbol[1])
		elif not symbol.isspace(): out.append(symbol)
	return ''.join(out)

def parse_subtype(raw_type:str) -> list[str]:
	interior = generic_interior(raw_type)
	if interior is None: return []
	pieces = (normalize(piece) for piece in splitter.split(splitter.is_delimiter, interior))
	return [piece for piece in pieces if piece]
