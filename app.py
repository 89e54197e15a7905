from datetime import date

from flask import (
    Flask,
    request,
    abort,
    jsonify,
)
from werkzeug.middleware.proxy_fix import ProxyFix

from cal import Locale, cal, parse_date, parse_day_range, parse_weekday
from table import render_calendar

app = Flask(__name__)
app.json.sort_keys = False
app.config.from_prefixed_env('CAL')

app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)


def default_locale(first_day):
    if first_day is None:
        return Locale.from_system()
    try:
        return Locale.from_system(parse_weekday(str(first_day)))
    except ValueError as e:
        raise ValueError(f'CAL_FIRST_DAY: {e}') from e


LOCALE = default_locale(app.config.get('FIRST_DAY'))


def arg(name, parser, default=None):
    value = request.args.get(name)
    if not value:
        return default
    try:
        return parser(value)
    except ValueError as e:
        abort(400, description=f'{name}: {e}')


def args(name, parser):
    values = []
    for value in request.args.getlist(name):
        if not value:
            continue
        try:
            values.append(parser(value))
        except ValueError as e:
            abort(400, description=f'{name}: {e}')
    return values


def blocks():
    today = date.today()
    start = arg('start', parse_date, today)
    end = arg('end', parse_date, start)
    first_day = arg('first_day', parse_weekday)

    highlight_days = [day for days in args('highlight_day', parse_day_range) for day in days]
    if 'highlight_date' in request.args:
        highlight_dates = args('highlight_date', parse_date)
    else:
        highlight_dates = [today]

    app.logger.debug('calendar %s..%s first_day=%s', start, end, first_day)
    return cal(start, end, first_day, highlight_days, highlight_dates, LOCALE)


@app.get("/")
def index():
    text = render_calendar(blocks())
    return text + '\n' if text else '', 200, {'Content-Type': 'text/plain; charset=utf-8'}


@app.get("/months.json")
def months():
    return jsonify([
        {'label': block.label, 'columns': block.columns, 'rows': block.rows}
        for block in blocks()
    ])
