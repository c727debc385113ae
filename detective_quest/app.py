"""HTTP API for the Detective Quest investigation."""
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from detective_quest.casefile import CaseFile
from detective_quest.engine import EmptyClueError, Investigation
from detective_quest.locations import InvalidMove, NoSuchPath, walk_preorder

app = Flask(__name__)
CORS(app)

# In-memory investigation (will reset on server restart)
current_case = CaseFile.default()
investigation = Investigation(current_case)


def reset_game(case: Optional[CaseFile] = None):
    """Tear down the running investigation and start a fresh one."""
    global investigation, current_case
    if case is not None:
        current_case = case
    investigation.close()
    investigation = Investigation(current_case)
    return investigation.start_exploration()


def _error(message: str, status: int = 400):
    return jsonify({"status": "error", "message": message}), status


def _room_payload(room):
    if room is None:
        return None
    return {
        "name": room.name,
        "can_go_left": room.left is not None,
        "can_go_right": room.right is not None,
        "dead_end": room.is_leaf(),
    }


@app.route('/api/game/new', methods=['POST'])
def new_game():
    """Start a new investigation at the entrance."""
    room = reset_game()
    return jsonify({
        "status": "success",
        "message": "New game started",
        "case": current_case.name,
        "room": _room_payload(room),
    })


@app.route('/api/game/state', methods=['GET'])
def get_state():
    return jsonify({
        "case": current_case.name,
        "room": _room_payload(investigation.position),
        "clues_count": investigation.clue_count(),
        "suspects_count": len(investigation.suspects),
    })


@app.route('/api/game/map', methods=['GET'])
def get_map():
    rooms = [
        {"name": node.name, "depth": depth}
        for node, depth in walk_preorder(investigation.map_root)
    ]
    return jsonify({"rooms": rooms, "text": "\n".join(investigation.map_lines())})


@app.route('/api/game/explore', methods=['POST'])
def explore():
    """Go back to the entrance and start exploring again."""
    try:
        room = investigation.start_exploration()
    except ValueError as exc:
        return _error(str(exc))
    return jsonify({"status": "success", "room": _room_payload(room)})


@app.route('/api/game/move', methods=['POST'])
def move():
    """Take one step left, right, or stop exploring."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _error("JSON object body required")

    direction = data.get("direction")
    if not isinstance(direction, str) or not direction:
        return _error("direction required")

    if investigation.position is None:
        return _error("Not exploring; start exploring first")

    try:
        room = investigation.move(direction)
    except (InvalidMove, NoSuchPath) as exc:
        return _error(f"Invalid move or missing path: {exc}")

    if room is None:
        return jsonify({"status": "success", "message": "Exploration stopped", "room": None})

    return jsonify({
        "status": "success",
        "room": _room_payload(room),
        "found": [{"clue": clue, "suspect": suspect} for clue, suspect in investigation.found],
    })


@app.route('/api/game/clues', methods=['GET'])
def get_clues():
    """List collected clues in alphabetical order."""
    found = investigation.clues()
    return jsonify({"clues": found, "count": len(found)})


@app.route('/api/game/clues', methods=['POST'])
def add_clue():
    """Record a clue by hand and associate it with a suspect."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _error("JSON object body required")

    text = data.get("text", "")
    suspect_name = data.get("suspect") or ""
    if not isinstance(text, str) or not isinstance(suspect_name, str):
        return _error("text and suspect must be strings")

    try:
        suspect = investigation.add_clue(text, suspect_name)
    except EmptyClueError:
        return _error("Empty clue not added")

    return jsonify({
        "status": "success",
        "message": "Clue added and associated",
        "suspect": {"name": suspect.name, "clue_count": suspect.clue_count},
    })


@app.route('/api/game/suspects', methods=['GET'])
def get_suspects():
    """List suspects with their clues in index order."""
    suspects = [
        {"name": name, "clues": found, "clue_count": len(found)}
        for name, found in investigation.associations()
    ]
    return jsonify({"suspects": suspects})


@app.route('/api/game/suspects/top', methods=['GET'])
def get_top_suspect():
    top = investigation.prime_suspect()
    if top is None:
        return jsonify({"suspect": None})
    return jsonify({"suspect": {"name": top.name, "clue_count": top.clue_count, "clues": list(top.clues)}})


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint."""
    return jsonify({"status": "ok", "service": "detective-quest"})


if __name__ == '__main__':
    app.run(debug=True, port=5001)
