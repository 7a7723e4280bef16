"""
Built-in lookup tables, used by ExpansionContext.default().
Applications that need other tables should build their own ExpansionContext, possibly starting from copies of these ones.
"""

########################################################################################################################################################
#####
#####  TAG SETTINGS
#####

_HTML_TAGS_VOID  = "area base br col embed hr img input link meta param source track wbr".split()
_HTML_TAGS_BLOCK = "html head body ul ol dl table tbody thead tfoot tr select optgroup nav section article header footer " \
                   "aside main form fieldset figure blockquote".split()

_DEFAULT_ATTRS = {
    'a':        {'href': ''},
    'img':      {'src': '', 'alt': ''},
    'link':     {'rel': 'stylesheet', 'href': ''},
    'form':     {'action': ''},
    'label':    {'for': ''},
    'iframe':   {'src': '', 'frameborder': '0'},
    'area':     {'shape': '', 'coords': '', 'href': '', 'alt': ''},
    'embed':    {'src': '', 'type': ''},
    'object':   {'data': '', 'type': ''},
    'input':    {'type': ''},
}

def _create_settings():
    settings = {}
    for name in _HTML_TAGS_VOID:
        settings.setdefault(name, {})['selfClosing'] = True
    for name in _HTML_TAGS_BLOCK:
        settings.setdefault(name, {})['block'] = True
    for name, attrs in _DEFAULT_ATTRS.items():
        if attrs: settings.setdefault(name, {})['defaultAttr'] = dict(attrs)
    return settings

TAG_SETTINGS = _create_settings()


########################################################################################################################################################
#####
#####  ALIASES
#####

ALIASES = {
    # shorter names of elements
    'bq':           'blockquote',
    'acr':          'acronym',
    'fig':          'figure',
    'figc':         'figcaption',
    'ifr':          'iframe',
    'emb':          'embed',
    'obj':          'object',
    'src':          'source',
    'cap':          'caption',
    'colg':         'colgroup',
    'fst':          'fieldset',
    'btn':          'button',
    'optg':         'optgroup',
    'opt':          'option',
    'tarea':        'textarea',
    'leg':          'legend',
    'sect':         'section',
    'art':          'article',
    'hdr':          'header',
    'ftr':          'footer',
    'adr':          'address',
    'dlg':          'dialog',
    'str':          'strong',
    'prog':         'progress',
    'datal':        'datalist',
    'out':          'output',
    'det':          'details',

    # elements with attributes
    'a:link':       'a[href=http://]',
    'a:mail':       'a[href=mailto:]',
    'link:css':     'link[href=style.css]',
    'link:favicon': 'link[rel="shortcut icon" type=image/x-icon href=favicon.ico]',
    'script:src':   'script[src=]',
    'input:text':   'input[type=text name="" value=""]',
    'inp':          'input[type=text name="" value=""]',
    'input:hidden': 'input[type=hidden name="" value=""]',
    'input:checkbox': 'input[type=checkbox name="" value=""]',
    'input:submit': 'input[type=submit value=""]',
    'meta:utf':     'meta[http-equiv=Content-Type content="text/html;charset=UTF-8"]',
    'meta:vp':      'meta[name=viewport content="width=device-width, initial-scale=1.0"]',

    # expand shorthands:  name+
    'ul+':          'ul>li',
    'ol+':          'ol>li',
    'dl+':          'dl>dt+dd',
    'map+':         'map>area',
    'table+':       'table>tr>td',
    'tr+':          'tr>td',
    'select+':      'select>option',
    'optgroup+':    'optgroup>option',
    'colgroup+':    'colgroup>col',

    # whole documents
    'html:5':       '!!!+html[lang=en]>(head>meta[charset=UTF-8]+title{Document})+body',
}


########################################################################################################################################################
#####
#####  MARKUP SNIPPETS
#####

TAG_SNIPPETS = {
    'html': {
        '!!!':      '<!doctype html>',
        '!!!4t':    '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN" "http://www.w3.org/TR/html4/loose.dtd">',
        '!!!4s':    '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01//EN" "http://www.w3.org/TR/html4/strict.dtd">',
        'cc:ie':    '<!--[if IE]>\n${child}\n<![endif]-->',
        'cc:noie':  '<!--[if !IE]><!-->\n${child}\n<!--<![endif]-->',
    },
    'haml': {
        '!!!':      '!!! 5',
        '!!!4t':    '!!! Transitional',
        '!!!4s':    '!!! Strict',
    },
    'hiccup': {},
}


########################################################################################################################################################
#####
#####  CSS
#####

CSS_SNIPPETS = {
    'm':        'margin:|;',
    'mt':       'margin-top:|;',
    'mr':       'margin-right:|;',
    'mb':       'margin-bottom:|;',
    'ml':       'margin-left:|;',
    'p':        'padding:|;',
    'pt':       'padding-top:|;',
    'pr':       'padding-right:|;',
    'pb':       'padding-bottom:|;',
    'pl':       'padding-left:|;',
    'w':        'width:|;',
    'h':        'height:|;',
    'maw':      'max-width:|;',
    'mah':      'max-height:|;',
    'miw':      'min-width:|;',
    'mih':      'min-height:|;',
    't':        'top:|;',
    'r':        'right:|;',
    'b':        'bottom:|;',
    'l':        'left:|;',
    'z':        'z-index:|;',
    'op':       'opacity:|;',
    'lh':       'line-height:|;',
    'fw':       'font-weight:|;',
    'fz':       'font-size:|;',
    'fs':       'font-style:${1:italic};',
    'ff':       'font-family:|;',
    'c':        'color:${1:#000};',
    'bgc':      'background-color:${1:#fff};',
    'bg':       'background:${1:#000};',
    'bg+':      'background:${1:#fff} url(${2}) ${3:0} ${4:0} ${5:no-repeat};',
    'bd':       'border:|;',
    'bd+':      'border:${1:1px} ${2:solid} ${3:#000};',
    'bdc':      'border-color:${1:#000};',
    'bdrs':     'border-radius:|;',
    'bxsh':     'box-shadow:${1:inset }${2:hoff} ${3:voff} ${4:blur} ${5:color};',
    'bxz':      'box-sizing:${1:border-box};',
    'd':        'display:${1:block};',
    'dn':       'display:none;',
    'db':       'display:block;',
    'di':       'display:inline;',
    'dib':      'display:inline-block;',
    'df':       'display:flex;',
    'pos':      'position:${1:relative};',
    'trf':      'transform:|;',
    'trs':      'transition:${1:prop} ${2:time};',
    'ta':       'text-align:${1:left};',
    'td':       'text-decoration:${1:none};',
    'tt':       'text-transform:${1:uppercase};',
    'cur':      'cursor:${1:pointer};',
    'ov':       'overflow:${1:hidden};',
    'fl':       'float:${1:left};',
    'cl':       'clear:${1:both};',
    'va':       'vertical-align:${1:top};',
    'whs':      'white-space:${1:nowrap};',
    'ap':       'appearance:${1:none};',
    'us':       'user-select:${1:none};',
    'fx':       'flex:|;',
    'fxd':      'flex-direction:${1:row};',
    'jc':       'justify-content:${1:center};',
    'ai':       'align-items:${1:center};',
}

SASS_SNIPPETS = {}

UNIT_ALIASES = {
    'e':    'em',
    'p':    '%',
    'x':    'ex',
    'r':    'rem',
}

COLOR = {
    'shortenIfPossible':    True,
    'case':                 'auto',
    'trailingAliases':      {},
}

VENDOR_PROPERTIES = {
    'box-shadow':       ['webkit', 'moz'],
    'border-radius':    ['webkit', 'moz'],
    'transform':        ['webkit', 'moz', 'ms', 'o'],
    'transition':       ['webkit', 'moz', 'o'],
    'user-select':      ['webkit', 'moz', 'ms'],
    'appearance':       ['webkit', 'moz'],
    'box-sizing':       ['webkit', 'moz'],
}

UNITLESS = {'z-index', 'line-height', 'opacity', 'font-weight', 'zoom', 'flex', 'flex-grow', 'flex-shrink', 'order'}
