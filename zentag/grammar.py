r"""
Zentag abbreviation language.
A one-line, CSS-selector-like notation that expands into a tree of markup elements.

SYNTAX

    div                 -- element:  <div></div>
    br/                 -- element forced to be self-closing:  <br/>
    #main  .box         -- id/class alone imply a <div>
    a#top.nav.wide      -- id and classes:  <a id="top" class="nav wide">
    a[href=/x title="A b" hidden]
                        -- properties; quoted values may contain spaces; a missing value renders as ""
    p{Hello \} world}   -- text inside an element; \} is a literal brace, other escapes drop the backslash
    {plain text}        -- standalone text node

    ul>li               -- child
    h1+p                -- sibling
    ul>li+li            -- siblings inside the same parent:  <ul><li></li><li></li></ul>
    (dt+dd)*2           -- group, can be multiplied or nested like a single element
    li*3                -- multiplier: 3 copies
    li.item$$*3         -- numbering token in any name, id, class, property or text:  item01 item02 item03
    li{$@-}*3           -- descending numbering:  3 2 1
    li{$@10}*3          -- numbering from base 10:  10 11 12
    ul+                 -- expand shorthand: alias registered under the name "ul+", e.g. ul>li
    lorem  lorem10      -- lorem ipsum text, 30 words by default
    ul>li*2|haml|e      -- filter chain, applied to the whole abbreviation (extracted before parsing)

PRECEDENCE (loosest first)

    |filters    +siblings    >child    *multiplier    (group)    {text}    tag

A child expression extends to the end of the enclosing group, so `a>b+c` puts both `b` and `c` inside `a`,
while `(a>b)+c` makes `c` a sibling of `a`.
"""


########################################################################################################################################################
grammar = r"""

###  STRUCTURE

abbreviation     =  siblings

siblings         =  sibling_item (plus sibling_item)*
sibling_item     =  expand / parent_child
expand           =  element plus &(plus / ')' / end)    # name+ shorthand, only when followed by another '+', ')' or end of input

parent_child     =  multiplier (gt siblings)?
multiplier       =  operand (star count)?
operand          =  group / text / tag
group            =  '(' siblings ')'

###  ELEMENTS

tag              =  element / implicit
element          =  tag_name attr_short* props? text?
implicit         =  attr_short+ props? text?             # no tag name: "div" is assumed

tag_name         =  ~r"[a-zA-Z!][a-zA-Z0-9:!$@-]*/?"       # trailing slash marks a self-closing tag
attr_short       =  tag_id / tag_class
tag_id           =  '#' short_name
tag_class        =  '.' short_name
short_name       =  ~r"[a-zA-Z0-9_:!$@-]+"

###  PROPERTIES

props            =  '[' ws prop (space prop)* ws ']'
prop             =  prop_name (ws '=' ws prop_value)?
prop_name        =  ~r"[a-zA-Z0-9_:!$@.-]+"
prop_value       =  quoted / unquoted
quoted           =  ~r'"[^"]*"'
unquoted         =  ~r"[^,+>{}()\[\] ]*"

###  TEXT & NUMBERS

text             =  ~r"\{((?:\\.|[^\\}])*)\}"s
count            =  ~r"[0-9]+"

###  BASIC TOKENS

plus             =  '+'
gt               =  '>'
star             =  '*'
space            =  ~r" +"
ws               =  ~r" *"
end              =  !~r"."s

"""

# human-readable names of grammar rules, for error messages: "expected <label>"
LABELS = {
    'abbreviation':     "abbreviation",
    'siblings':         "abbreviation",
    'sibling_item':     "( or a-zA-Z0-9",
    'parent_child':     "( or a-zA-Z0-9",
    'multiplier':       "( or a-zA-Z0-9",
    'operand':          "( or a-zA-Z0-9",
    'group':            "(...) group",
    'tag':              "tag",
    'element':          "tag",
    'implicit':         "#id or .class",
    'tag_name':         "tag name",
    'attr_short':       "#id or .class",
    'tag_id':           "#id",
    'tag_class':        ".class",
    'short_name':       "name after # or .",
    'props':            "[properties]",
    'prop':             "property",
    'prop_name':        "property name",
    'prop_value':       "property value",
    'quoted':           "closing quote",
    'text':             "{text}",
    'count':            "*n where n is a number",
}
