"""Command line front end: keygen, encrypt, decrypt (JSON envelopes)."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from blockmodes.common.config import ModeConfig
from blockmodes.common.errors import ModeError
from blockmodes.common.protocol import Envelope
from blockmodes.common.utils import take_random
from blockmodes.crypto.aes import KEY_SIZE
from blockmodes.crypto.registry import MODES, get_mode

log = logging.getLogger(__name__)


def _parse_key(key_hex: str) -> bytes:
    try:
        return bytes.fromhex(key_hex)
    except ValueError as e:
        raise ModeError(f"key is not valid hex: {e}") from e


def cmd_keygen(args, cfg: ModeConfig) -> int:
    print(take_random(KEY_SIZE).hex())
    return 0


def cmd_encrypt(args, cfg: ModeConfig) -> int:
    if args.text is not None:
        data = args.text.encode("utf-8")
    else:
        data = Path(args.infile).read_bytes()
    mode = get_mode(args.mode)
    ct = mode.encrypt(data, _parse_key(args.key), config=cfg)
    log.info("[ENCRYPT] mode=%s in=%d out=%d bytes", mode.name, len(data), len(ct))
    print(Envelope.wrap(mode.name, ct).model_dump_json())
    return 0


def cmd_decrypt(args, cfg: ModeConfig) -> int:
    if args.envelope is not None:
        raw = args.envelope
    else:
        raw = Path(args.infile).read_text(encoding="utf-8")
    env = Envelope.model_validate_json(raw)
    mode = get_mode(env.mode)
    pt = mode.decrypt(env.cipher_text(), _parse_key(args.key), config=cfg)
    log.info("[DECRYPT] mode=%s out=%d bytes", mode.name, len(pt))
    if args.hex:
        print(pt.hex())
    else:
        print(pt.decode("utf-8", errors="replace"))
    return 0


def _config_from_args(args) -> ModeConfig:
    cfg = ModeConfig()
    changes = {}
    if args.workers is not None:
        changes["workers"] = args.workers
    if args.no_strict_padding:
        changes["strict_padding"] = False
    if args.log_level:
        changes["log_level"] = args.log_level
    return replace(cfg, **changes)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blockmodes", description="AES-128 in ECB / CBC / CTR mode"
    )
    parser.add_argument("--workers", type=int, help="thread pool size for parallel paths")
    parser.add_argument(
        "--no-strict-padding",
        action="store_true",
        help="only check the trailing length byte when removing padding",
    )
    parser.add_argument("--log-level", help="logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("keygen", help="print a random 16-byte key as hex")
    p.set_defaults(func=cmd_keygen)

    p = sub.add_parser("encrypt", help="encrypt text or a file into a JSON envelope")
    p.add_argument("--mode", required=True, choices=sorted(MODES))
    p.add_argument("--key", required=True, help="key as hex")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--text", help="UTF-8 plaintext")
    src.add_argument("--in", dest="infile", help="plaintext file")
    p.set_defaults(func=cmd_encrypt)

    p = sub.add_parser("decrypt", help="decrypt a JSON envelope")
    p.add_argument("--key", required=True, help="key as hex")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--envelope", help="envelope JSON")
    src.add_argument("--in", dest="infile", help="file holding envelope JSON")
    p.add_argument("--hex", action="store_true", help="print plaintext as hex")
    p.set_defaults(func=cmd_decrypt)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = _config_from_args(args)
        logging.basicConfig(
            level=cfg.log_level.upper(), format="%(levelname)s %(name)s %(message)s"
        )
        return args.func(args, cfg)
    # ModeError and pydantic ValidationError are both ValueErrors
    except (ValueError, OSError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
