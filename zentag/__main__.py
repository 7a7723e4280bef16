"""
Command-line front end:

    $ python -m zentag 'ul>li.item$*3'
    $ python -m zentag --css 'm10+p5-10!'
    $ python -m zentag --dialect haml --indent 2 '#main>p{Hi}'
"""

import argparse, logging, sys

from zentag.config import DIALECT_FILTERS, CSS_SYNTAXES, SELF_CLOSING
from zentag.expander import Expander


def _build_parser():
    p = argparse.ArgumentParser(
        prog = "zentag",
        description = "Expand an abbreviation into markup or CSS",
    )
    p.add_argument("abbreviation", help = "abbreviation to expand, e.g. ul>li*3 or m10+p5")
    p.add_argument("--css", action = "store_true", help = "treat the abbreviation as CSS")
    p.add_argument("--dialect", choices = list(DIALECT_FILTERS), default = "html", help = "markup dialect used when no |filter is given")
    p.add_argument("--ext", metavar = "EXT", help = "extension of the target document; selects the default filters")
    p.add_argument("--sass", action = "store_true", help = "CSS output without trailing semicolons")
    p.add_argument("--jsx", action = "store_true", help = "use className instead of class")
    p.add_argument("--self-closing", choices = list(SELF_CLOSING), default = "/", help = "suffix of self-closing tags")
    p.add_argument("--indent", type = int, default = 4, metavar = "N", help = "no. of spaces per indentation level")
    p.add_argument("-v", "--verbose", action = "store_true", help = "log debug messages to stderr")
    return p


def main(argv = None):
    """Run the command line; return 0 if an expansion was printed, 1 if the abbreviation couldn't be expanded."""
    p = _build_parser()
    args = p.parse_args(argv)
    if args.indent < 0:
        p.error("--indent must not be negative")
    logging.basicConfig(level = logging.DEBUG if args.verbose else logging.WARNING, format = "%(name)s: %(message)s")

    expander = Expander(dialect      = args.dialect,
                        css_syntax   = CSS_SYNTAXES[1] if args.sass else CSS_SYNTAXES[0],
                        class_attr   = 'className' if args.jsx else 'class',
                        self_closing = args.self_closing,
                        indent       = ' ' * args.indent)

    if args.css:
        out = expander.expand_css(args.abbreviation)
    else:
        out = expander.expand(args.abbreviation, extension = args.ext)

    if out is None:
        return 1
    print(out)
    return 0


if __name__ == '__main__':
    sys.exit(main())
