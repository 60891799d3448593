import logging

from flask import Flask, request, jsonify

from chaincrypto.address import to_checksum_address
from chaincrypto.encoding import hex_encode
from commitment.commitments import EntropyUnavailableError, make_commitment, verify_reveal
from commitment.config import load_config, parse_choice, service_address

logger = logging.getLogger(__name__)

app = Flask(__name__)

@app.post("/commit")
def commit():
    """
    Request JSON (both optional, defaults from COMMIT_* env):
    {
        "account_id": "0x...",
        "choice": int
    }
    """
    data = request.get_json(force=True, silent=True)
    if data is None:
        data = {}
    elif not isinstance(data, dict):
        return jsonify({"error": "Expected a JSON object"}), 400

    try:
        cfg = load_config()
        c = make_commitment(
            data.get("account_id", cfg.account_id),
            parse_choice(data.get("choice", cfg.choice)),
        )
    except EntropyUnavailableError as e:
        logger.error("commitment refused: %s", e)
        return jsonify({"error": str(e)}), 503
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({
        "commit_hash": hex_encode(c.commit_hash),
        "account_id": to_checksum_address(c.account_id),
        "choice": c.choice,
        "nonce": hex_encode(c.nonce),
    }), 200

@app.post("/verify")
def verify():
    data = request.get_json(force=True, silent=True)
    if data is None:
        data = {}
    elif not isinstance(data, dict):
        return jsonify({"error": "Expected a JSON object"}), 400

    required = {"commit_hash", "choice", "nonce"}
    if not required.issubset(data.keys()):
        return jsonify({"error": f"Missing required fields: {sorted(required)}"}), 400

    try:
        ok = verify_reveal(
            data["commit_hash"],
            data.get("account_id", load_config().account_id),
            parse_choice(data["choice"]),
            data["nonce"],
        )
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({"valid": ok}), 200

@app.get("/health")
def health():
    return {"ok": True}, 200

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    host, port = service_address()
    app.run(host=host, port=port)
