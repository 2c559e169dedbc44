"""Rendering of deferred titles.

Titles of the movable cycle are computed as (key, params) pairs and only
rendered here, from Jinja2 templates, once a locale has been chosen.
"""

import functools

import jinja2

from .util import ordinal, roman


TITLES = {
    'en': {
        'temporale.advent.sunday': '{{ week|ordinal }} Sunday of Advent',
        'temporale.advent.ferial':
            '{{ weekday|weekday }}, {{ week|ordinal }} week of Advent',
        'temporale.christmas.sunday':
            '{{ week|ordinal }} Sunday after the Nativity of the Lord',
        'temporale.christmas.ferial': '{{ weekday|weekday }}, Christmas Time',
        'temporale.christmas.nativity_octave.ferial':
            '{{ day|ordinal }} day in the Octave of the Nativity of the Lord',
        'temporale.christmas.after_epiphany.ferial':
            '{{ weekday|weekday }} after Epiphany',
        'temporale.lent.sunday': '{{ week|ordinal }} Sunday of Lent',
        'temporale.lent.ferial':
            '{{ weekday|weekday }}, {{ week|ordinal }} week of Lent',
        'temporale.lent.after_ashes.ferial':
            '{{ weekday|weekday }} after Ash Wednesday',
        'temporale.lent.holy_week.ferial': '{{ weekday|weekday }} of Holy Week',
        'temporale.easter.sunday': '{{ week|ordinal }} Sunday of Easter',
        'temporale.easter.ferial':
            '{{ weekday|weekday }}, {{ week|ordinal }} week of Easter',
        'temporale.easter.octave.ferial':
            '{{ weekday|weekday }} within the Octave of Easter',
        'temporale.ordinary.sunday': '{{ week|ordinal }} Sunday in Ordinary Time',
        'temporale.ordinary.ferial':
            '{{ weekday|weekday }}, {{ week|ordinal }} week in Ordinary Time',

        'temporale.solemnity.nativity': 'The Nativity of the Lord',
        'temporale.solemnity.holy_family':
            'The Holy Family of Jesus, Mary and Joseph',
        'temporale.solemnity.mother_of_god': 'Mary, Mother of God',
        'temporale.solemnity.epiphany': 'The Epiphany of the Lord',
        'temporale.solemnity.baptism_of_lord': 'The Baptism of the Lord',
        'temporale.solemnity.ash_wednesday': 'Ash Wednesday',
        'temporale.solemnity.good_friday':
            "Friday of the Passion of the Lord",
        'temporale.solemnity.holy_saturday': 'Holy Saturday',
        'temporale.solemnity.palm_sunday':
            "Palm Sunday of the Passion of the Lord",
        'temporale.solemnity.easter_sunday':
            'Easter Sunday of the Resurrection of the Lord',
        'temporale.solemnity.ascension': 'Ascension of the Lord',
        'temporale.solemnity.pentecost': 'Pentecost Sunday',
        'temporale.solemnity.holy_trinity': 'The Most Holy Trinity',
        'temporale.solemnity.body_blood':
            'The Most Holy Body and Blood of Christ',
        'temporale.solemnity.sacred_heart':
            'The Most Sacred Heart of Jesus',
        'temporale.solemnity.christ_king':
            'Our Lord Jesus Christ, King of the Universe',
        'temporale.solemnity.immaculate_heart':
            'The Immaculate Heart of the Blessed Virgin Mary',
        'temporale.solemnity.christ_eternal_priest':
            'Our Lord Jesus Christ, the Eternal High Priest',
    },
    'la': {
        'temporale.advent.sunday': 'Dominica {{ week|roman }}. Adventus',
        'temporale.advent.ferial':
            '{{ weekday|weekday }} hebdomadæ {{ week|roman }}. Adventus',
        'temporale.christmas.sunday':
            'Dominica {{ week|roman }}. post Nativitatem',
        'temporale.christmas.ferial':
            '{{ weekday|weekday }} temporis Nativitatis',
        'temporale.christmas.nativity_octave.ferial':
            'Dies {{ day|roman }}. infra octavam Nativitatis',
        'temporale.christmas.after_epiphany.ferial':
            '{{ weekday|weekday }} post Epiphaniam',
        'temporale.lent.sunday': 'Dominica {{ week|roman }}. Quadragesimæ',
        'temporale.lent.ferial':
            '{{ weekday|weekday }} hebdomadæ {{ week|roman }}. Quadragesimæ',
        'temporale.lent.after_ashes.ferial':
            '{{ weekday|weekday }} post Cineres',
        'temporale.lent.holy_week.ferial':
            '{{ weekday|weekday }} Hebdomadæ Sanctæ',
        'temporale.easter.sunday': 'Dominica {{ week|roman }}. Paschæ',
        'temporale.easter.ferial':
            '{{ weekday|weekday }} hebdomadæ {{ week|roman }}. Paschæ',
        'temporale.easter.octave.ferial':
            '{{ weekday|weekday }} infra octavam Paschæ',
        'temporale.ordinary.sunday':
            'Dominica {{ week|roman }}. per annum',
        'temporale.ordinary.ferial':
            '{{ weekday|weekday }} hebdomadæ {{ week|roman }}. per annum',

        'temporale.solemnity.nativity': 'In Nativitate Domini',
        'temporale.solemnity.holy_family':
            'S. Familiæ Iesu, Mariæ et Ioseph',
        'temporale.solemnity.mother_of_god': 'Sanctæ Dei Genetricis Mariæ',
        'temporale.solemnity.epiphany': 'In Epiphania Domini',
        'temporale.solemnity.baptism_of_lord': 'In Baptismate Domini',
        'temporale.solemnity.ash_wednesday': 'Feria IV Cinerum',
        'temporale.solemnity.good_friday': 'Feria VI in Passione Domini',
        'temporale.solemnity.holy_saturday': 'Sabbatum Sanctum',
        'temporale.solemnity.palm_sunday':
            'Dominica in Palmis de Passione Domini',
        'temporale.solemnity.easter_sunday':
            'Dominica Paschæ in Resurrectione Domini',
        'temporale.solemnity.ascension': 'In Ascensione Domini',
        'temporale.solemnity.pentecost': 'Dominica Pentecostes',
        'temporale.solemnity.holy_trinity': 'Sanctissimæ Trinitatis',
        'temporale.solemnity.body_blood':
            'Sanctissimi Corporis et Sanguinis Christi',
        'temporale.solemnity.sacred_heart': 'Sacratissimi Cordis Iesu',
        'temporale.solemnity.christ_king':
            'D. N. Iesu Christi universorum Regis',
        'temporale.solemnity.immaculate_heart':
            'Immaculati Cordis B. Mariæ Virginis',
        'temporale.solemnity.christ_eternal_priest':
            'D. N. Iesu Christi Summi et Æterni Sacerdotis',
    },
}

WEEKDAYS = {
    'en': ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday',
           'Saturday'],
    'la': ['Dominica', 'Feria II', 'Feria III', 'Feria IV', 'Feria V',
           'Feria VI', 'Sabbatum'],
}

ORDINALS = {
    'en': ordinal,
    'la': roman,
}


@functools.lru_cache(maxsize=None)
def _environment(locale):
    env = jinja2.Environment(undefined=jinja2.StrictUndefined)
    env.filters['ordinal'] = ORDINALS[locale]
    env.filters['roman'] = roman
    env.filters['weekday'] = lambda n: WEEKDAYS[locale][n]
    return env


@functools.lru_cache(maxsize=None)
def _template(locale, key):
    return _environment(locale).from_string(TITLES[locale][key])


def translate(key, params=None, locale='en'):
    """Renders the title registered under `key` for `locale`.  Raises
    KeyError for an unknown key or locale.
    """
    return _template(locale, key).render(params or {})


def translator(locale):
    """Returns a two-argument translate function bound to `locale`, as
    expected by Celebration.resolve_title().
    """
    if locale not in TITLES:
        raise KeyError(locale)
    return functools.partial(translate, locale=locale)
