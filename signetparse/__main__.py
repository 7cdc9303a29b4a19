"""
Parse a signature (or a single type token) written in the signet notation
and print the resulting structure, as JSON by default.

  py -m signetparse "name:string, options:[object] => function"
  py -m signetparse --type "tuple<string;tuple<string;int>>"
"""

import sys, argparse, json

from signetparse.parser import Parser
from signetparse.support import memo, pretty
from signetparse.support.interfaces import SignatureError, MalformedConstraint
from signetparse.support.failureprone import SourceText

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m signetparse', description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument('text', help='signature text (or type token, with --type)')
	parser.add_argument('-t', '--type', action='store_true', help='parse a single type token rather than a whole signature')
	parser.add_argument('-i', '--indent', help='indent the JSON output for easier reading.', action='store_const', dest='indent', const=2, default=None)
	parser.add_argument('--pretty', action='store_true', help='Display an indented tree on STDOUT instead of JSON.')
	parser.add_argument('--lenient', action='store_true', help='Warn rather than fail when a signature has no output stage.')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk, mainly about memo hits and misses.")
	return parser.parse_args(argv)

def report(error:SignatureError, text:str):
	if isinstance(error, MalformedConstraint): SourceText(text).complain(error.slice(), error.args[0])
	else: print(error.args[0], file=sys.stderr)

def main(args):
	if args.verbose: memo.VERBOSE = True
	parser = Parser(strict=not args.lenient)
	try:
		if args.type: result = parser.parse_type(args.text)
		else: result = parser.parse_signature(args.text)
	except SignatureError as e:
		report(e, args.text)
		return 1
	if args.pretty:
		if args.type: print(pretty.format_type(result))
		else: pretty.print_tree(result)
	else:
		json.dump(result.as_data(), sys.stdout, indent=args.indent)
		print()
	return 0

if __name__ == '__main__': sys.exit(main(parse_arguments()))
