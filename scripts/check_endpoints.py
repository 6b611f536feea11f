"""
Smoke-check the endpoints of a running monitor instance.
Run: python scripts/check_endpoints.py [base_url]
"""

import asyncio
import sys

import httpx

BASE_URL = "http://localhost:8080"

# Output colors
GREEN = '\033[92m'
RED = '\033[91m'
YELLOW = '\033[93m'
BLUE = '\033[94m'
RESET = '\033[0m'


def print_test(name: str):
    """Print the check name."""
    print(f"\n{BLUE}{'='*60}{RESET}")
    print(f"{BLUE}{name}{RESET}")
    print(f"{BLUE}{'='*60}{RESET}")


def print_success(message: str):
    print(f"{GREEN}OK   {message}{RESET}")


def print_error(message: str):
    print(f"{RED}FAIL {message}{RESET}")


def print_info(message: str):
    print(f"{YELLOW}     {message}{RESET}")


async def check_health(client: httpx.AsyncClient) -> bool:
    """GET / should return the app name and version."""
    print_test("Health")
    response = await client.get("/")
    if response.status_code != 200:
        print_error(f"Status {response.status_code}: {response.text}")
        return False

    data = response.json()
    print_success(f"{data.get('name')} {data.get('version')}")
    return True


async def check_update(client: httpx.AsyncClient) -> bool:
    """POST /transaction/update runs one forwarding pass."""
    print_test("Transaction update")
    response = await client.post("/transaction/update")
    data = response.json()

    if response.status_code == 200:
        print_success(f"{data['count']} transactions forwarded, total {data['total']}")
        return True

    print_error(f"Status {response.status_code}")
    for error in data.get("error", []):
        print_info(error)
    return False


async def check_total(client: httpx.AsyncClient) -> bool:
    """GET /transaction/total returns the balance of the configured address."""
    print_test("Transaction total")
    response = await client.get("/transaction/total")
    data = response.json()

    if response.status_code == 200:
        print_success(f"{data['total']} {data['currency']} at {data['timestamp']}")
        return True

    print_error(f"Status {response.status_code}: {data.get('error')}")
    return False


async def main(base_url: str) -> int:
    print_info(f"Target: {base_url}")
    try:
        async with httpx.AsyncClient(base_url=base_url, timeout=60.0) as client:
            results = [
                await check_health(client),
                await check_update(client),
                await check_total(client),
            ]
    except httpx.ConnectError:
        print_error("Could not connect to the server")
        print_info("Make sure it is running: uvicorn app.main:app --port 8080")
        return 1

    passed = sum(results)
    print(f"\n{passed}/{len(results)} checks passed")
    return 0 if all(results) else 1


if __name__ == "__main__":
    url = sys.argv[1] if len(sys.argv) > 1 else BASE_URL
    sys.exit(asyncio.run(main(url)))
