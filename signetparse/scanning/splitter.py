"""
Split text into top-level tokens without breaking up nested generic groups.

The predicate decides which symbols are delimiters; the bracket depth decides
whether a delimiter counts. Only delimiters at depth zero split the text.
Everything else, escapes included, is copied verbatim into the current token.
"""

from typing import Callable

from .symbols import SymbolScanner, is_escape
from ..support.interfaces import ARROW, DOUBLE_COLON

def is_comma(symbol:str) -> bool: return symbol == ','
def is_delimiter(symbol:str) -> bool: return symbol == ';' or symbol == ','
def is_double_colon(symbol:str) -> bool: return symbol == DOUBLE_COLON
def is_arrow(symbol:str) -> bool: return symbol == ARROW

def split(is_split_symbol:Callable[[str], bool], text:str) -> list[str]:
	"""
	Consecutive delimiters yield empty tokens, which are kept.
	A trailing empty token is not: "a,b," splits into ['a', 'b'].
	"""
	return [token for start, token in split_with_offsets(is_split_symbol, text)]

def split_with_offsets(is_split_symbol:Callable[[str], bool], text:str) -> list[tuple[int, str]]:
	""" Same as `split`, but each token comes paired with its starting offset in `text`. """
	tokens, current, start = [], [], 0
	yy = SymbolScanner(text)
	for symbol in yy:
		if _splits(yy, symbol, is_split_symbol):
			tokens.append((start, ''.join(current)))
			current, start = [], yy.right
		else: current.append(symbol)
	if current: tokens.append((start, ''.join(current)))
	return tokens

def ends_with_split(is_split_symbol:Callable[[str], bool], text:str) -> bool:
	"""
	True if the very last symbol of `text` is a top-level delimiter.
	That is exactly the case where `split` drops a trailing empty token.
	"""
	last = False
	yy = SymbolScanner(text)
	for symbol in yy: last = _splits(yy, symbol, is_split_symbol)
	return last

def _splits(yy:SymbolScanner, symbol:str, is_split_symbol) -> bool:
	return yy.depth == 0 and not is_escape(symbol) and is_split_symbol(symbol)
