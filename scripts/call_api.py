import argparse
import asyncio

import httpx

ENTRY_POINTS = {
    "payment": "getPaymentSession",
    "subscription": "getSubscriptionSession",
}


async def main(base_url: str, mode: str, amount: float):
    async with httpx.AsyncClient(base_url=base_url, timeout=30) as client:
        response = await client.post(
            f"/{ENTRY_POINTS[mode]}",
            json={"data": {"amount": amount}},
        )
    print(response.status_code, response.json())


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Calls a checkout session callable")
    parser.add_argument("--base-url", default="http://localhost:5000")
    parser.add_argument("--mode", choices=ENTRY_POINTS.keys(), default="payment")
    parser.add_argument("--amount", type=float, default=10)
    args = parser.parse_args()
    asyncio.run(main(args.base_url, args.mode, args.amount))
