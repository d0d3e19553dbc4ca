import os
from pathlib import Path

root_path = Path(__file__).parent.parent.parent

path_dic = {
    "root": root_path,
    "env": root_path.joinpath(".env"),
    "logs": Path(os.environ.get("LOG_DIR", root_path.joinpath("logs"))),
    "uploads": Path(os.environ.get("UPLOAD_DIR", root_path.joinpath("public").joinpath("uploads"))),
}
