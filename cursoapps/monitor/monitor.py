"""Interactive site monitor that checks URLs and keeps an availability log."""

from __future__ import annotations

import argparse
import urllib.error
import urllib.request
from datetime import datetime
from pathlib import Path

DEFAULT_SITES_PATH = Path("./docs/sites.txt")
DEFAULT_LOG_PATH = Path("./docs/log.txt")


def read_sites(path: str | Path = DEFAULT_SITES_PATH) -> list[str]:
    """Return the non-blank lines of the sites file, stripped of whitespace."""
    with open(path, encoding="utf-8") as handle:
        return [line.strip() for line in handle if line.strip()]


def register_log(site: str, online: bool, log_path: str | Path = DEFAULT_LOG_PATH) -> None:
    """Append one timestamped availability record for ``site``."""
    stamp = datetime.now().strftime("%d/%m/%Y %H:%M:%S")
    with open(log_path, "a", encoding="utf-8") as handle:
        handle.write(f"{stamp} - {site} - online: {str(online).lower()}\n")


def check_site(site: str, log_path: str | Path = DEFAULT_LOG_PATH) -> bool:
    """Fetch ``site``, report and log whether it answered with status 200."""
    try:
        with urllib.request.urlopen(site, timeout=30) as response:
            status = response.status
    except urllib.error.HTTPError as err:
        status = err.code
        err.close()

    online = status == 200
    if online:
        print("site:", site, "foi carregado com sucesso!")
    else:
        print("site:", site, "está com problemas. Status code:", status)
    register_log(site, online, log_path)
    return online


def start_monitoring(
    sites_path: str | Path = DEFAULT_SITES_PATH,
    log_path: str | Path = DEFAULT_LOG_PATH,
) -> list[bool]:
    """Check every site listed in ``sites_path`` once; return each result."""
    print("monitorando...")
    results: list[bool] = []
    try:
        for index, site in enumerate(read_sites(sites_path)):
            print("testando site", index, ":", site)
            try:
                online = check_site(site, log_path)
            except (OSError, ValueError) as err:
                print("error:", err)
                register_log(site, False, log_path)
                online = False
            results.append(online)
        print()
    finally:
        print()
    return results


def read_logs(log_path: str | Path = DEFAULT_LOG_PATH) -> str:
    """Return the whole content of the log file."""
    return Path(log_path).read_text(encoding="utf-8")


def _read_command() -> int:
    try:
        return int(input().split()[0])
    except (EOFError, IndexError, ValueError):
        return 0


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu until the user leaves or gives an unknown command."""
    parser = argparse.ArgumentParser(description="monitoring sites cli")
    parser.add_argument("--sites", type=Path, default=DEFAULT_SITES_PATH)
    parser.add_argument("--log", type=Path, default=DEFAULT_LOG_PATH)
    args = parser.parse_args(argv)

    print("monitoring sites cli")
    print("version:", "1.1")

    while True:
        print("1-> iniciar monitoramento")
        print("2-> exibir logs")
        print("3-> sair do programa")

        command = _read_command()
        try:
            if command == 1:
                start_monitoring(args.sites, args.log)
            elif command == 2:
                print("exibindo logs...")
                print(read_logs(args.log))
                print()
            elif command == 3:
                print("saindo...")
                return 0
            else:
                print("não conheço esse comando!!")
                return -1
        except OSError as err:
            print("error:", err)


if __name__ == "__main__":
    raise SystemExit(main())