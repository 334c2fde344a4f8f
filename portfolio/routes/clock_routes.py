from flask import Blueprint, Response, current_app, jsonify, request, stream_with_context
from pytz.exceptions import UnknownTimeZoneError

from portfolio import content
from portfolio.utils.clock import TimeDisplay, clock_events, format_time

bp = Blueprint('clock', __name__, url_prefix='/api/time')


def _requested_zone():
    return (request.args.get("tz") or content.person.location).strip()


# Current wall-clock time, used for the first paint and by non-streaming clients
@bp.route('')
def current_time():
    time_zone = _requested_zone()
    try:
        value = format_time(time_zone)
    except UnknownTimeZoneError:
        return jsonify({"error": "Unknown time zone"}), 400
    resp = jsonify({"time_zone": time_zone, "time": value})
    resp.headers['Cache-Control'] = 'no-store'
    return resp


# One event per second for as long as the client stays connected
@bp.route('/stream')
def time_stream():
    time_zone = _requested_zone()
    try:
        display = TimeDisplay(time_zone, interval=current_app.config["CLOCK_INTERVAL"])
    except UnknownTimeZoneError:
        return jsonify({"error": "Unknown time zone"}), 400

    logger = current_app.logger
    logger.info("Clock stream opened for %s", time_zone)

    def generate():
        try:
            yield from clock_events(display, timeout=15)
        finally:
            logger.info("Clock stream closed for %s", time_zone)

    resp = Response(stream_with_context(generate()), mimetype="text/event-stream")
    resp.headers['Cache-Control'] = 'no-store'
    resp.headers['X-Accel-Buffering'] = 'no'
    return resp
