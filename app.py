from flask import Flask, redirect, url_for

from tinydb import TinyDB
from tinydb.storages import MemoryStorage

from pcs.kzg import config
from kzg_routes import kzg_bp, init_kzg_bp


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_mapping(
        KZG_MAX_DEGREE=config.WEB_MAX_DEGREE,
    )
    if test_config is not None:
        app.config.from_mapping(test_config)

    # SRS는 실행 간에 저장하지 않는다 (Memory DB)
    db = TinyDB(storage=MemoryStorage)
    init_kzg_bp(db.table("kzg"))
    app.register_blueprint(kzg_bp)

    @app.route("/")
    def main():
        return redirect(url_for("kzg.state"))

    return app


app = create_app()


if __name__ == "__main__":
    app.run(debug=True)
