import json
import os
import sys

from nopad32.codec import encode, decode
from nopad32.errors import Base32Error

OPERATIONS = ("encode", "decode")


def load_config(path: str) -> dict:
    with open(path) as f:
        config = json.loads(f.read())

    if config.get("operation") not in OPERATIONS:
        sys.exit("operation must be one of: " + ", ".join(OPERATIONS))
    if not config.get("input_path"):
        sys.exit("input_path is required")
    config.setdefault("output_path", "")
    return config


def run(config: dict) -> int:
    try:
        if config["operation"] == "encode":
            with open(config["input_path"], "rb") as f:
                result = encode(f.read())
        else:
            with open(config["input_path"]) as f:
                text = f.read()
            if text.endswith("\n"):
                text = text[:-1]
            if text.endswith("\r"):
                text = text[:-1]
            result = decode(text)
    except OSError as e:
        print("read-error", e)
        return 1
    except Base32Error as e:
        print("decode-error", e)
        return 1

    output_path = config["output_path"]
    if not output_path:
        if isinstance(result, bytes):
            sys.stdout.buffer.write(result)
            sys.stdout.flush()
        else:
            print(result)
        return 0

    try:
        if isinstance(result, bytes):
            with open(output_path, "wb") as f:
                f.write(result)
        else:
            with open(output_path, "w") as f:
                f.write(result)
    except OSError as e:
        print("write-error", e)
        return 1

    print(config["operation"] + "d", len(result), "->", output_path)
    return 0


def main(argv: list[str]) -> int:
    if len(argv) > 1:
        config_path = argv[1]
    else:
        config_path = os.path.join(os.path.dirname(argv[0]), "config.json")
    return run(load_config(config_path))


if __name__ == "__main__":
    sys.exit(main(sys.argv))
