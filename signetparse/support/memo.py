"""
An unbounded memo for parse results, keyed on the text that was parsed.

The parse results are mutable lists, and callers are allowed to scribble on what
they get back. So the memo never hands out what it holds: every read, hit or miss,
returns a fresh deep copy. That way one caller's edits can never show up in the
memo, nor in another caller's result.
"""

import copy
import threading

VERBOSE = False

class Memo:
	def __init__(self, function, name=None):
		self.__function = function
		self.__name = name or getattr(function, '__name__', 'memo')
		self.__table = {}
		self.__lock = threading.Lock()

	def __call__(self, key:str):
		with self.__lock:
			if key in self.__table:
				if VERBOSE: print("%s: hit %r"%(self.__name, key))
			else:
				if VERBOSE: print("%s: miss %r"%(self.__name, key))
				self.__table[key] = self.__function(key)
			return copy.deepcopy(self.__table[key])

	def __len__(self): return len(self.__table)
	def __contains__(self, key): return key in self.__table

	def clear(self):
		with self.__lock: self.__table.clear()
