"""
KZG Flask Blueprint — 커밋먼트 데모 엔드포인트
================================================

단계: Setup → Polynomial → Commit → Open → Verify
모든 엔드포인트는 JSON을 주고받는다.

상태는 app.py가 주입하는 TinyDB(MemoryStorage)에 저장하므로
프로세스가 끝나면 SRS도 함께 사라진다.
"""

import logging
import secrets

from flask import Blueprint, current_app, jsonify, request
from tinydb import Query

from pcs.kzg import config
from pcs.kzg.cli import create_polynomial
from pcs.kzg.commitment import commit
from pcs.kzg.errors import InsufficientParameters, KZGError, MalformedInput
from pcs.kzg.field import random_scalar
from pcs.kzg.prover import open_many
from pcs.kzg.srs import SRS, check_degree
from pcs.kzg.verifier import verify_many

from kzg_serializers import (
    serialize_fr_list, deserialize_fr_list,
    serialize_g1, deserialize_g1,
    serialize_g1_list, deserialize_g1_list,
    serialize_poly, deserialize_poly,
    serialize_srs, deserialize_srs,
    g1_short, g2_short, fr_short,
)

logger = logging.getLogger(__name__)

kzg_bp = Blueprint('kzg', __name__, url_prefix='/kzg')

DATA = Query()

# DB는 app.py에서 주입
DB = None

# 각 단계가 지우는 하위 단계 키
DOWNSTREAM = {
    "setup": ("kzg.polynomial", "kzg.commitment", "kzg.opening"),
    "polynomial": ("kzg.commitment", "kzg.opening"),
    "commit": ("kzg.opening",),
}


def init_kzg_bp(db):
    """app.py에서 DB를 주입받는다."""
    global DB
    DB = db


class MissingStep(Exception):
    """선행 단계가 아직 실행되지 않았을 때 (HTTP 409)."""


# ─── DB 헬퍼 ───

def db_get(key):
    """DB에서 키로 데이터를 조회한다."""
    result = DB.search(DATA.type == key)
    if not result:
        return None
    return result[0].get("data")


def db_set(key, data):
    """DB에 키로 데이터를 저장한다."""
    DB.upsert({"type": key, "data": data}, DATA.type == key)


def db_remove(key):
    """DB에서 키를 삭제한다."""
    DB.remove(DATA.type == key)


def db_require(key, step):
    data = db_get(key)
    if data is None:
        raise MissingStep(f"'{step}' 단계를 먼저 실행하세요")
    return data


def _clear_downstream(step):
    for key in DOWNSTREAM.get(step, ()):
        db_remove(key)


def _json_body():
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise MalformedInput("JSON 객체가 필요합니다")
    return body


# ─── 오류 처리 ───

@kzg_bp.errorhandler(KZGError)
def handle_kzg_error(e):
    logger.info("Rejected request: %s: %s", e.kind, e)
    return jsonify({"error": e.kind, "message": str(e)}), 400


@kzg_bp.errorhandler(MissingStep)
def handle_missing_step(e):
    return jsonify({"error": "MissingStep", "message": str(e)}), 409


# ──────────────────────────────────────────────────────────────
# 상태 조회 / 초기화
# ──────────────────────────────────────────────────────────────

@kzg_bp.route("/state")
def state():
    """현재 저장된 단계별 요약을 반환한다."""
    srs_data = db_get("kzg.srs")
    poly_data = db_get("kzg.polynomial")
    return jsonify({
        "srs": None if srs_data is None else {"max_degree": srs_data["max_degree"]},
        "polynomial": poly_data,
        "commitment": db_get("kzg.commitment"),
        "opening": db_get("kzg.opening"),
    })


@kzg_bp.route("/reset", methods=["POST"])
def reset():
    """모든 KZG 데이터를 클리어한다."""
    for key in ("kzg.srs",) + DOWNSTREAM["setup"]:
        db_remove(key)
    return jsonify({"ok": True})


# ──────────────────────────────────────────────────────────────
# Setup
# ──────────────────────────────────────────────────────────────

@kzg_bp.route("/setup", methods=["POST"])
def setup():
    """SRS를 생성한다. 이전 다항식/커밋먼트/증명은 지운다."""
    body = _json_body()
    max_degree = body.get("max_degree")
    check_degree(max_degree, limit=current_app.config["KZG_MAX_DEGREE"])
    seed = body.get("seed")

    srs = SRS.generate(max_degree, seed=seed)
    logger.info("Generated SRS (max_degree=%d)", max_degree)

    db_set("kzg.srs", serialize_srs(srs))
    _clear_downstream("setup")

    return jsonify({
        "max_degree": max_degree,
        "g1_count": len(srs.g1_powers),
        "g2_count": len(srs.g2_powers),
        "g1_samples": [g1_short(p) for p in srs.g1_powers[:5]],
        "g2_samples": [g2_short(p) for p in srs.g2_powers[:2]],
    })


# ──────────────────────────────────────────────────────────────
# Polynomial
# ──────────────────────────────────────────────────────────────

@kzg_bp.route("/polynomial", methods=["POST"])
def polynomial():
    """다항식을 저장한다. coeffs가 없으면 데모 다항식 (cᵢ = i + 2)."""
    srs_data = db_require("kzg.srs", "setup")
    body = _json_body()

    if body.get("coeffs") is None:
        poly = create_polynomial(srs_data["max_degree"])
    else:
        poly = deserialize_poly(body["coeffs"])
        if poly.degree > srs_data["max_degree"]:
            raise InsufficientParameters(
                f"다항식 차수 {poly.degree}가 SRS 최대 차수 {srs_data['max_degree']}를 초과합니다"
            )

    db_set("kzg.polynomial", serialize_poly(poly))
    _clear_downstream("polynomial")

    return jsonify({
        "coeffs": serialize_poly(poly),
        "degree": poly.degree,
        "display": repr(poly),
    })


# ──────────────────────────────────────────────────────────────
# Commit
# ──────────────────────────────────────────────────────────────

@kzg_bp.route("/commit", methods=["POST"])
def commit_polynomial():
    """저장된 다항식을 커밋한다."""
    srs = deserialize_srs(db_require("kzg.srs", "setup"))
    poly = deserialize_poly(db_require("kzg.polynomial", "polynomial"))

    commitment = commit(srs.g1_powers, poly)

    db_set("kzg.commitment", {"point": serialize_g1(commitment)})
    _clear_downstream("commit")

    return jsonify({
        "commitment": serialize_g1(commitment),
        "display": g1_short(commitment),
    })


# ──────────────────────────────────────────────────────────────
# Open
# ──────────────────────────────────────────────────────────────

@kzg_bp.route("/open", methods=["POST"])
def open_points():
    """평가 점들에서 평가값과 증명을 만든다. points가 없으면 무작위 1~3개."""
    srs = deserialize_srs(db_require("kzg.srs", "setup"))
    poly = deserialize_poly(db_require("kzg.polynomial", "polynomial"))
    db_require("kzg.commitment", "commit")
    body = _json_body()

    if body.get("points") is None:
        rng = secrets.SystemRandom()
        count = rng.randint(config.MIN_QUERY_POINTS, config.MAX_QUERY_POINTS)
        points = [random_scalar(rng) for _ in range(count)]
    else:
        points = deserialize_fr_list(body["points"])

    ys, proofs = open_many(srs.g1_powers, poly, points)

    opening = {
        "points": serialize_fr_list(points),
        "ys": serialize_fr_list(ys),
        "proofs": serialize_g1_list(proofs),
    }
    db_set("kzg.opening", opening)

    return jsonify(dict(opening, display=[
        {"z": fr_short(z), "y": fr_short(y), "proof": g1_short(p)}
        for z, y, p in zip(points, ys, proofs)
    ]))


# ──────────────────────────────────────────────────────────────
# Verify
# ──────────────────────────────────────────────────────────────

@kzg_bp.route("/verify", methods=["POST"])
def verify_opening():
    """저장된 열기 증명을 검증한다.

    body에 commitment, ys, proofs를 넣으면 저장된 값 대신 사용한다
    (조작된 주장이 검증에 실패하는 것을 확인하는 용도).
    """
    srs = deserialize_srs(db_require("kzg.srs", "setup"))
    opening = db_require("kzg.opening", "open")
    body = _json_body()

    if body.get("commitment") is not None:
        commitment = deserialize_g1(body["commitment"], check=True)
    else:
        commitment = deserialize_g1(db_require("kzg.commitment", "commit")["point"])

    if body.get("proofs") is not None:
        proofs = deserialize_g1_list(body["proofs"], check=True)
    else:
        proofs = deserialize_g1_list(opening["proofs"])

    if body.get("ys") is not None:
        ys = deserialize_fr_list(body["ys"])
    else:
        ys = deserialize_fr_list(opening["ys"])

    points = deserialize_fr_list(opening["points"])

    result = verify_many(commitment, proofs, points, ys, srs.g2_powers)
    logger.info("Verification result: %s", result)

    return jsonify({"result": result})
