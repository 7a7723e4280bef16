"""
End-to-end tests of markup expansion.

Run:
$
$  pytest -v zentag/tests.py

"""

import random, pytest
from concurrent.futures import ThreadPoolExecutor

from zentag import Expander, ExpansionContext, RenderOptions, ConfigError, ConfigMissing
from zentag.__main__ import main

zen = Expander()


#####################################################################################################################################################
#####
#####  UTILITIES
#####

class FixedRandom:
    """Random source that always draws the lowest value: lorem text starts at the 1st word and sentences end with '!'."""
    def randrange(self, stop):  return 0
    def randint(self, a, b):    return a

def make_context(**tables):
    """ExpansionContext with empty tables, except for those given in `tables`."""
    empty = dict(aliases = {}, tag_snippets = {'html': {}}, tag_settings = {}, css_snippets = {}, sass_snippets = {},
                 unit_aliases = {}, color = {}, vendor_properties = {}, unitless = ())
    empty.update(tables)
    return ExpansionContext(**empty)


#####################################################################################################################################################
#####
#####  TESTS
#####

def test_001_basic():
    assert zen.expand('foo') == '<foo></foo>'                   # no alias, no settings: passes through unchanged
    assert zen.expand('div') == '<div></div>'
    assert zen.expand('div#a.b.c') == '<div id="a" class="b c"></div>'
    assert zen.expand('#main') == '<div id="main"></div>'
    assert zen.expand('.x.y') == '<div class="x y"></div>'
    assert zen.expand('p{Hello world}') == '<p>Hello world</p>'
    assert zen.expand('span[title="A b" data-x=1]') == '<span title="A b" data-x="1"></span>'

def test_002_self_closing():
    assert zen.expand('br') == '<br/>'
    assert zen.expand('div/') == '<div/>'
    assert zen.expand('img') == '<img src="" alt=""/>'
    assert zen.expand('img[src=a.png]') == '<img src="a.png" alt=""/>'
    assert zen.expand('br{x}') == '<br>x</br>'                  # a void tag with text is not self-closing
    assert Expander(self_closing = ' /').expand('br') == '<br />'
    assert Expander(self_closing = '').expand('hr') == '<hr>'

def test_003_default_attrs():
    assert zen.expand('a') == '<a href=""></a>'
    assert zen.expand('a[href=x title="A b"]') == '<a href="x" title="A b"></a>'
    assert zen.expand('a[disabled]') == '<a href="" disabled=""></a>'
    assert zen.expand('a#top.nav') == '<a id="top" class="nav" href=""></a>'

def test_004_nesting():
    assert zen.expand('ul>li*3') == '<ul>\n    <li></li>\n    <li></li>\n    <li></li>\n</ul>'
    assert zen.expand('ul>li') == '<ul>\n    <li></li>\n</ul>'
    assert zen.expand('div>p') == '<div><p></p></div>'
    assert zen.expand('div>p+p') == '<div>\n    <p></p>\n    <p></p>\n</div>'
    assert zen.expand('h1+p') == '<h1></h1>\n<p></p>'
    assert zen.expand('(div>b)+i') == '<div><b></b></div>\n<i></i>'
    assert zen.expand('div>b+i') == '<div>\n    <b></b>\n    <i></i>\n</div>'
    assert zen.expand('div{Hi}>p') == '<div>Hi<p></p></div>'
    assert zen.expand('ul>li>p+p') == '<ul>\n    <li>\n        <p></p>\n        <p></p>\n    </li>\n</ul>'

def test_005_multiplier():
    for n in range(5):
        assert zen.expand(f'i*{n}') == '\n'.join(['<i></i>'] * n)
    assert zen.expand('(dt+dd)*2') == '<dt></dt>\n<dd></dd>\n<dt></dt>\n<dd></dd>'
    assert zen.expand('ul>li*0') == '<ul></ul>'

def test_006_numbering():
    assert zen.expand('a{click$}*3') == '<a href="">click1</a>\n<a href="">click2</a>\n<a href="">click3</a>'
    assert zen.expand('span{$$@-3}*2') == '<span>04</span>\n<span>03</span>'
    assert zen.expand('li.item$$*3') == '<li class="item01"></li>\n<li class="item02"></li>\n<li class="item03"></li>'
    assert zen.expand('i{$@5}*3') == '<i>5</i>\n<i>6</i>\n<i>7</i>'
    assert zen.expand('i{$@-}*3') == '<i>3</i>\n<i>2</i>\n<i>1</i>'
    assert zen.expand('i{$@-5}*3') == '<i>7</i>\n<i>6</i>\n<i>5</i>'
    assert zen.expand('h$*2') == '<h1></h1>\n<h2></h2>'
    assert zen.expand('i[data-n=$]*2') == '<i data-n="1"></i>\n<i data-n="2"></i>'
    assert zen.expand('p{$}') == '<p>1</p>'                     # no multiplier: as if multiplied by 1
    assert zen.expand('p{\\$}*2') == '<p>$</p>\n<p>$</p>'

def test_007_nested_numbering():
    # the inner multiplier owns the tokens inside it, the outer one doesn't overwrite them
    out = '<ul>\n    <li>1</li>\n    <li>2</li>\n</ul>'
    assert zen.expand('ul*2>li{$}*2') == out + '\n' + out
    assert zen.expand('(i{$}*2)*2') == '<i>1</i>\n<i>2</i>\n<i>1</i>\n<i>2</i>'
    # a child of a multiplied parent is numbered by the parent's multiplier
    assert zen.expand('li*3>b{$}') == '<li><b>1</b></li>\n<li><b>2</b></li>\n<li><b>3</b></li>'
    assert zen.expand('ul.u$*2>li') == '<ul class="u1">\n    <li></li>\n</ul>\n<ul class="u2">\n    <li></li>\n</ul>'

def test_008_text():
    assert zen.expand('{hello}') == 'hello'
    assert zen.expand('p{a \\} b}') == '<p>a } b</p>'
    assert zen.expand('p{a \\q b}') == '<p>a q b</p>'
    assert zen.expand('p>{text}') == '<p>text</p>'
    assert zen.expand('p>{a}+b') == '<p>\n    a\n    <b></b>\n</p>'
    assert zen.expand('{x}*2') == 'x\nx'

def test_009_aliases():
    assert zen.expand('bq') == '<blockquote></blockquote>'
    assert zen.expand('bq.quote{Hi}') == '<blockquote class="quote">Hi</blockquote>'
    assert zen.expand('bq>p') == '<blockquote>\n    <p></p>\n</blockquote>'
    assert zen.expand('a:link') == '<a href="http://"></a>'
    assert zen.expand('a:link#home.x') == '<a id="home" class="x" href="http://"></a>'
    assert zen.expand('a:link[href=y]') == '<a href="y"></a>'
    assert zen.expand('inp') == '<input type="text" name="" value=""/>'

def test_010_expand_shorthand():
    assert zen.expand('ul+') == '<ul>\n    <li></li>\n</ul>'
    assert zen.expand('ul.nav+') == '<ul class="nav">\n    <li></li>\n</ul>'
    assert zen.expand('ul++ol+') == '<ul>\n    <li></li>\n</ul>\n<ol>\n    <li></li>\n</ol>'
    assert zen.expand('table+') == '<table>\n    <tr>\n        <td></td>\n    </tr>\n</table>'
    assert zen.expand('(ul+)*2') == '<ul>\n    <li></li>\n</ul>\n<ul>\n    <li></li>\n</ul>'
    assert zen.expand('foo+') is None                           # no alias registered under "foo+"

def test_011_snippets():
    assert zen.expand('!!!') == '<!doctype html>'
    assert zen.expand('cc:ie>p') == '<!--[if IE]>\n<p></p>\n<![endif]-->'
    assert zen.expand('!!!|haml') == '!!! 5'
    out = """
<!doctype html>
<html lang="en">
    <head>
        <meta charset="UTF-8"/>
        <title>Document</title>
    </head>
    <body></body>
</html>
"""
    assert zen.expand('html:5') == out.strip()

def test_012_lorem():
    fixed = Expander(random = FixedRandom())
    assert fixed.expand('p>lorem3') == '<p>Lorem ipsum dolor!</p>'
    assert fixed.expand('lorem7') == 'Lorem ipsum dolor sit amet! Lorem ipsum!'

    text = Expander(random = random.Random(5)).expand('lorem')
    assert len(text.split()) == 30
    assert text[0].isupper() and text[-1] in '.!?'

def test_013_commented_html():
    assert zen.expand('#a.b|c') == '<!-- #a.b -->\n<div id="a" class="b"></div>\n<!-- /#a.b -->'
    assert zen.expand('p|c') == '<p></p>'
    out = '<div>\n    <!-- .x -->\n    <p class="x"></p>\n    <!-- /.x -->\n</div>'
    assert zen.expand('div>p.x|c') == out
    assert Expander(dialect = 'commented-html').expand('.x') == '<!-- .x -->\n<div class="x"></div>\n<!-- /.x -->'

def test_014_haml():
    assert zen.expand('p|haml') == '%p'
    assert zen.expand('div#main.x>p{Hi}|haml') == '#main.x\n    %p\n        Hi'
    assert zen.expand('div|haml') == '%div'
    assert zen.expand('a[href=x]|haml') == '%a{:href => "x"}'
    assert zen.expand('ul>li*2|haml') == '%ul\n    %li\n    %li'
    assert zen.expand('p', extension = 'haml') == '%p'
    assert Expander(dialect = 'haml').expand('span.a') == '%span.a'

def test_015_hiccup():
    assert zen.expand('div#a.b>p{Hi}|hic') == '[:div#a.b [:p "Hi"]]'
    assert zen.expand('ul>li*2|hic') == '[:ul\n    [:li]\n    [:li]]'
    assert zen.expand('a[href=x]{go}|hic') == '[:a {:href "x"} "go"]'
    assert zen.expand('{hi}|hic') == '"hi"'
    assert zen.expand('p', extension = 'clj') == '[:p]'
    assert zen.expand('p', extension = '.CLJS') == '[:p]'
    assert zen.expand('p', extension = 'txt') == '<p></p>'     # unknown extension: the dialect is used

def test_016_escape():
    assert zen.expand('p.x>a|e') == '&lt;p class="x"&gt;&lt;a href=""&gt;&lt;/a&gt;&lt;/p&gt;'
    assert zen.expand('p{a & b}|e') == '&lt;p&gt;a &amp; b&lt;/p&gt;'
    assert zen.expand('p{&lt;}|e') == '&lt;p&gt;&amp;lt;&lt;/p&gt;'
    assert zen.expand('p|haml|e') == '%p'
    assert zen.expand('p{<}|html|e') == '&lt;p&gt;&lt;&lt;/p&gt;'
    assert Expander(dialect = 'haml').expand('p{<}|e') == '%p\n    &lt;'

def test_017_broken_filters():
    assert zen.expand('p|foo') is None
    assert zen.expand('p|e|html') is None                       # primary filter applied to text
    assert zen.expand('p|html|c') is None

def test_018_options():
    assert Expander(class_attr = 'className').expand('.a') == '<div className="a"></div>'
    assert Expander(indent = '  ').expand('ul>li') == '<ul>\n  <li></li>\n</ul>'
    assert Expander(indent = '\t').expand('ul>li') == '<ul>\n\t<li></li>\n</ul>'

    with pytest.raises(ConfigError, match = 'dialect'):
        Expander(dialect = 'xml')
    with pytest.raises(ConfigError, match = 'unknown'):
        RenderOptions(colour = 'red')
    with pytest.raises(ConfigError):
        RenderOptions(indent = 'xx')
    with pytest.raises(ConfigError):
        RenderOptions(self_closing = '//')

    options = RenderOptions(dialect = 'hiccup')
    assert options.dialect == 'hiccup' and options.indent == '    '
    assert options.default_filters() == ['hic']
    assert options.default_filters('haml') == ['haml']

def test_019_context():
    with pytest.raises(ConfigMissing) as ex_info:
        ExpansionContext()
    assert ex_info.value.table == 'aliases'
    with pytest.raises(ConfigMissing, match = 'unitless'):
        make_context(unitless = None)
    with pytest.raises(ConfigError):
        make_context(color = {'case': 'title'})

    context = make_context(aliases = {'box': 'div.box>p', 'p': 'p.x'})
    own = Expander(context)
    assert own.expand('box#x.y') == '<div id="x" class="box y"><p class="x"></p></div>'
    assert not isinstance(context.aliases['box'], str)          # parsed on first use and stored back
    assert own.expand('box.box') == '<div class="box"><p class="x"></p></div>'
    assert own.expand('box*2') == '<div class="box"><p class="x"></p></div>\n<div class="box"><p class="x"></p></div>'
    assert own.expand('p') == '<p class="x"></p>'               # an alias doesn't expand itself recursively
    assert own.expand('a') == '<a></a>'                         # no tag settings in this context

def test_020_failures():
    assert zen.expand('div>') is None
    assert zen.expand('div+') is None
    assert zen.expand('(div') is None
    assert zen.expand('div)') is None
    assert zen.expand('div*') is None
    assert zen.expand('div{abc') is None
    assert zen.expand('[x]') is None
    assert zen.expand('{a}>b') is None
    assert zen.expand('') is None
    assert zen.expand('(' * 30 + 'a' + ')' * 30) is None        # too deep
    assert zen.expand('a+' * 3000 + 'a') is None                # too long
    assert zen.expand('i*999999999') is None                    # too many elements

def test_021_concurrency():
    context = ExpansionContext.default()
    abbrs = ['ul>li.item$*3', 'bq.q', 'a:link', 'ul+', 'html:5', 'table+', 'dl+'] * 20
    expected = [Expander().expand(a) for a in abbrs]

    def expand(abbr):
        return Expander(context).expand(abbr)

    with ThreadPoolExecutor(max_workers = 8) as pool:
        assert list(pool.map(expand, abbrs)) == expected

def test_022_long_input():
    assert zen.expand('a+' * 1500 + 'a') == '\n'.join(['<a href=""></a>'] * 1501)
    assert zen.expand('+'.join(['(p>b)'] * 25)) == '\n'.join(['<p><b></b></p>'] * 25)
    assert zen.expand('ul>' + '+'.join(['(li>a)'] * 30)).count('<li><a href=""></a></li>') == 30
    assert zen.expand('i*3000000') is None
    assert zen.expand('ul*3000>li*3000') is None
    assert zen.expand('lorem999999999') is None
    assert zen.expand('(lorem5000)*3') is None

def test_023_quoting():
    assert zen.expand('p>{a"b}|hic') == '[:p "a\\"b"]'
    assert zen.expand('p{a\\\\b}|hic') == '[:p "a\\\\b"]'
    assert zen.expand('{say "hi"}|hic') == '"say \\"hi\\""'
    assert zen.expand('a[title=x"y]|hic') == '[:a {:title "x\\"y"}]'
    assert zen.expand('a[title=x"y]|haml') == '%a{:title => "x\\"y"}'
    assert zen.expand('p{a"b}|haml') == '%p\n    a"b'                 # HAML text is not quoted

def test_024_command_line(capsys):
    assert main(['ul>li']) == 0
    assert capsys.readouterr().out == '<ul>\n    <li></li>\n</ul>\n'
    assert main(['--dialect', 'haml', '--indent', '2', '#main>p{Hi}']) == 0
    assert capsys.readouterr().out == '#main\n  %p\n    Hi\n'
    assert main(['--jsx', '--self-closing', ' /', '.a>br']) == 0
    assert capsys.readouterr().out == '<div className="a"><br /></div>\n'
    assert main(['--ext', 'clj', 'p']) == 0
    assert capsys.readouterr().out == '[:p]\n'
    assert main(['--css', '--sass', 'm10+p5']) == 0
    assert capsys.readouterr().out == 'margin: 10px\npadding: 5px\n'

    assert main(['div>']) == 1
    assert main(['--css', '#fff']) == 1
    assert capsys.readouterr().out == ''

    for argv in [['--dialect', 'xml', 'p'], ['--indent', '-1', 'p'], []]:
        with pytest.raises(SystemExit) as ex_info:
            main(argv)
        assert ex_info.value.code == 2

def test_025_snippet_cache():
    context = ExpansionContext.default()
    own = Expander(context)
    own.expand('h$*50+foo+!!!')
    assert list(context._caches['snippet']) == [('html', '!!!')]
    own.expand_css('foo1+bar2+m1')
    assert list(context._caches['css-snippet']) == [('css', 'm')]
