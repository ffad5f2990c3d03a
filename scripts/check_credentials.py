import argparse
import asyncio

from abucoins_sdk import AbucoinsError, Client, HistoryParams
from exporter.settings import load_settings


async def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default=None)
    args = parser.parse_args()

    settings = load_settings(args.config)
    async with Client(settings.options) as client:
        try:
            await client.trade_history(HistoryParams(limit=1))
        except AbucoinsError as e:
            print(f"{type(e).__name__}: {e}")
            return
    print(f"ok endpoint={settings.options.endpoint}")


if __name__ == "__main__":
    asyncio.run(main())
