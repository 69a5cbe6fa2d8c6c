"""
main.py — algotrace Flask Adapter
==================================
Thin JSON API that lets a browser replay driver ask the engine for traces.
The engine packages never import this module; it only deserialises the
structure, calls the engine and serialises what comes back.

Routes:
  GET  /api/algorithms   – registry listing (pseudocode, complexity, tags)
  POST /api/search       – {"grid" | "graph", "start", "end", "variant"}
  POST /api/sort         – {"values", "variant"}
  POST /api/mst          – {"nodes", "edges"}  or  {"graph"}
  POST /api/traversal    – {"tree" | "values", "order"}
  POST /api/list         – {"list" | "values", "cycle_to", "variant", "target"}
  POST /api/stack        – {"variant", "operations" | "text"}
  POST /api/queue        – {"variant", "operations" | "tasks", "quantum"}
  POST /api/compare      – {"grid" | "graph", "start", "end", "left", "right"}

Every run answers with the recorder export: steps, metrics and, for
searches, visited_order / path.  Bad input is a 400 with {"error": …}.

Config (app.config, overridable with ALGOTRACE_* environment variables or
a mapping passed to create_app):
  MAX_GRID_CELLS, MAX_GRAPH_NODES, MAX_ARRAY_LENGTH, MAX_TREE_NODES,
  MAX_LIST_NODES, MAX_OPERATIONS (also caps stack text length), LOG_LEVEL
"""

import logging
from typing import Any, Dict, Mapping, Optional

from flask import Blueprint, Flask, current_app, jsonify, request

from algorithms import (
    LINKED_LIST, QUEUE, SEARCH, SORT, STACK, TRAVERSAL, AlgoInfo, get_algorithm, list_algorithms,
)
from engine import Recorder, compare
from engine.runner import DEFAULT_QUANTUM
from structures import BinaryTree, Graph, Grid, InvalidInput, LinkedList


logger = logging.getLogger("main")

DEFAULT_CONFIG: Dict[str, Any] = {
    "MAX_GRID_CELLS":   2500,     # 50 x 50
    "MAX_GRAPH_NODES":  200,
    "MAX_ARRAY_LENGTH": 200,
    "MAX_TREE_NODES":   255,
    "MAX_LIST_NODES":   100,
    "MAX_OPERATIONS":   200,
    "LOG_LEVEL":        "INFO",
}

api = Blueprint("api", __name__, url_prefix="/api")


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.update(DEFAULT_CONFIG)
    app.config.from_prefixed_env("ALGOTRACE")
    if config:
        app.config.update(config)
    app.register_blueprint(api)
    return app


@api.errorhandler(InvalidInput)
def handle_invalid_input(exc: InvalidInput):
    logger.info("rejected %s: %s", request.path, exc)
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@api.route("/algorithms", methods=["GET"])
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


# ---------------------------------------------------------------------------
# API: Runs
# ---------------------------------------------------------------------------
@api.route("/search", methods=["POST"])
def api_search():
    data = _body()
    space = _search_space(data)
    info = _card(data.get("variant", "bfs"), SEARCH)
    start, end = _endpoints(data, space)

    rec = Recorder()
    rec.start(info.key, space, source=start, target=end)
    rec.run_to_completion()
    return jsonify(rec.export())


@api.route("/sort", methods=["POST"])
def api_sort():
    data = _body()
    values = data.get("values")
    if isinstance(values, list) and len(values) > current_app.config["MAX_ARRAY_LENGTH"]:
        raise InvalidInput(f"Array has {len(values)} elements, limit is {current_app.config['MAX_ARRAY_LENGTH']}")
    info = _card(data.get("variant", "bubble"), SORT)

    rec = Recorder()
    rec.start(info.key, values)
    rec.run_to_completion()
    return jsonify(rec.export())


@api.route("/mst", methods=["POST"])
def api_mst():
    data = _body()
    if "graph" in data:
        graph = _graph(data["graph"])
        nodes, edges = graph.node_ids(), graph.edge_list()
    else:
        nodes, edges = data.get("nodes"), data.get("edges", [])
        if isinstance(nodes, list) and len(nodes) > current_app.config["MAX_GRAPH_NODES"]:
            raise InvalidInput(f"Graph has {len(nodes)} nodes, limit is {current_app.config['MAX_GRAPH_NODES']}")

    rec = Recorder()
    rec.start("kruskal", nodes, edges=edges)
    rec.run_to_completion()
    return jsonify(rec.export())


@api.route("/traversal", methods=["POST"])
def api_traversal():
    data = _body()
    if "tree" in data:
        tree = BinaryTree.from_dict(data["tree"])
    elif "values" in data:
        values = data["values"]
        if not isinstance(values, list):
            raise InvalidInput("'values' must be a list")
        tree = BinaryTree.from_values(values)
    else:
        raise InvalidInput("Request needs a 'tree' or 'values'")

    if tree.root is not None and tree.size() > current_app.config["MAX_TREE_NODES"]:
        raise InvalidInput(f"Tree has {tree.size()} nodes, limit is {current_app.config['MAX_TREE_NODES']}")
    info = _card(data.get("order", "inorder"), TRAVERSAL)

    rec = Recorder()
    rec.start(info.key, tree)
    rec.run_to_completion()
    return jsonify(rec.export())


@api.route("/list", methods=["POST"])
def api_list():
    data = _body()
    if "list" in data:
        linked = LinkedList.from_dict(data["list"])
    elif "values" in data:
        linked = LinkedList.from_values(data["values"], cycle_to=data.get("cycle_to"))
    else:
        raise InvalidInput("Request needs a 'list' or 'values'")

    limit = current_app.config["MAX_LIST_NODES"]
    if len(linked) > limit:
        raise InvalidInput(f"List has {len(linked)} nodes, limit is {limit}")
    info = _card(data.get("variant", "list_search"), LINKED_LIST)

    rec = Recorder()
    rec.start(info.key, linked, target=data.get("target"))
    rec.run_to_completion()
    return jsonify(rec.export())


@api.route("/stack", methods=["POST"])
def api_stack():
    data = _body()
    info = _card(data.get("variant", "stack_ops"), STACK)
    payload = data.get("operations") if info.key == "stack_ops" else data.get("text")
    _check_length(payload)

    rec = Recorder()
    rec.start(info.key, payload)
    rec.run_to_completion()
    return jsonify(rec.export())


@api.route("/queue", methods=["POST"])
def api_queue():
    data = _body()
    info = _card(data.get("variant", "queue_ops"), QUEUE)
    payload = data.get("operations") if info.key == "queue_ops" else data.get("tasks")
    _check_length(payload)

    rec = Recorder()
    rec.start(info.key, payload, quantum=data.get("quantum", DEFAULT_QUANTUM))
    rec.run_to_completion()
    return jsonify(rec.export())


@api.route("/compare", methods=["POST"])
def api_compare():
    data = _body()
    space = _search_space(data)
    start, end = _endpoints(data, space)
    left_info = _card(data.get("left", "bfs"), SEARCH)
    right_info = _card(data.get("right", "astar"), SEARCH)

    left, right = Recorder(), Recorder()
    for rec, info in ((left, left_info), (right, right_info)):
        rec.start(info.key, space, source=start, target=end)
        rec.run_to_completion()

    return jsonify({
        "left":       left.export(),
        "right":      right.export(),
        "comparison": compare(left, right).to_dict(),
    })


# ---------------------------------------------------------------------------
# Request parsing
# ---------------------------------------------------------------------------
def _body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object")
    return data


def _card(key: Any, family: str) -> AlgoInfo:
    info = get_algorithm(key.strip().lower()) if isinstance(key, str) else None
    if info is None or info.family != family:
        raise InvalidInput(f"Unknown {family} variant {key!r}")
    return info


def _search_space(data: Dict[str, Any]):
    if "grid" in data:
        return _grid(data["grid"])
    if "graph" in data:
        return _graph(data["graph"])
    raise InvalidInput("Request needs a 'grid' or a 'graph'")


def _grid(raw: Any) -> Grid:
    limit = current_app.config["MAX_GRID_CELLS"]
    if isinstance(raw, (list, str)):
        raw = {"layout": raw}
    if isinstance(raw, dict) and "layout" not in raw:
        rows, cols = raw.get("rows"), raw.get("cols")
        if isinstance(rows, int) and isinstance(cols, int) and rows * cols > limit:
            raise InvalidInput(f"Grid has {rows * cols} cells, limit is {limit}")
    grid = Grid.from_dict(raw)
    if len(grid) > limit:
        raise InvalidInput(f"Grid has {len(grid)} cells, limit is {limit}")
    return grid


def _graph(raw: Any) -> Graph:
    graph = Graph.from_adjacency_list(raw) if isinstance(raw, str) else Graph.from_dict(raw)
    limit = current_app.config["MAX_GRAPH_NODES"]
    if graph.node_count() > limit:
        raise InvalidInput(f"Graph has {graph.node_count()} nodes, limit is {limit}")
    return graph


def _check_length(payload: Any) -> None:
    limit = current_app.config["MAX_OPERATIONS"]
    if isinstance(payload, (list, str)) and len(payload) > limit:
        raise InvalidInput(f"Input has {len(payload)} entries, limit is {limit}")


def _endpoints(data: Dict[str, Any], space):
    """Grids fall back to their own start / end cells; graphs need a start."""
    start, end = data.get("start"), data.get("end")
    if isinstance(space, Grid):
        if start is None:
            start = space.start
        if "end" not in data:
            end = space.end
    elif start is None:
        raise InvalidInput("Graph search needs a 'start' node id")
    return start, end


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("algotrace API on http://localhost:5000")
    app.run(host="0.0.0.0", port=5000)
