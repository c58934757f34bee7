"""
Service Delivery Cost Navigator — Flask API Server
Thin JSON surface over the cost model engines. Every request carries its
own model/solution/values; the server keeps no calculation state.
"""
import os
import logging
from flask import Flask, jsonify, request
from engines.cost_model import calculate
from engines.errors import CostModelError
from engines.inputs import MODELS, SOLUTIONS, field_catalogue, load_assumptions
from engines.planning import plan_for_target, reverse_analysis

app = Flask(__name__)


def _body():
    return request.get_json(silent=True) or {}


def _error(e, status):
    return jsonify({'error': type(e).__name__, 'message': str(e)}), status


def _handle(fn):
    """Run an engine call, mapping model errors to 400 and anything else to 500."""
    try:
        return jsonify(fn())
    except CostModelError as e:
        return _error(e, 400)
    except Exception as e:
        logging.exception(f"{request.path} failed")
        return _error(e, 500)


# ══════════════════════════════════════════════════════════════
#  ROUTES
# ══════════════════════════════════════════════════════════════

@app.route('/api/options')
def api_options():
    return jsonify({'models': list(MODELS), 'solutions': list(SOLUTIONS)})


@app.route('/api/fields')
def api_fields():
    model = request.args.get('model', 'team')
    solution = request.args.get('solution', 'platform')
    return _handle(lambda: {'model': model, 'solution': solution,
                            'fields': field_catalogue(model, solution)})


@app.route('/api/assumptions')
def api_assumptions():
    model = request.args.get('model', 'team')
    solution = request.args.get('solution', 'platform')
    return _handle(lambda: {'model': model, 'solution': solution,
                            'values': load_assumptions(model, solution)})


@app.route('/api/calculate', methods=['POST'])
def api_calculate():
    body = _body()
    return _handle(lambda: calculate(body.get('model'), body.get('solution'), body.get('values')))


@app.route('/api/sensitivity', methods=['POST'])
def api_sensitivity():
    body = _body()
    return _handle(lambda: calculate(body.get('model'), body.get('solution'),
                                     body.get('values'))['sensitivity'])


@app.route('/api/planning/target', methods=['POST'])
def api_planning_target():
    body = _body()
    return _handle(lambda: plan_for_target(
        body.get('model'), body.get('values') or {}, body.get('targetType'),
        body.get('targetValue', 0), body.get('timeframe', 12)))


@app.route('/api/planning/reverse', methods=['POST'])
def api_planning_reverse():
    body = _body()
    return _handle(lambda: reverse_analysis(
        body.get('targetROIPeriod', 12), body.get('desiredSavings', 0),
        body.get('maxBudget'), body.get('teamMetrics')))


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    print("[OK] Cost Navigator engines ready")
    app.run(debug=False, host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
