#!/usr/bin/env python3
import asyncio
import json
import sys

import websockets
from jsonrpcclient import request

NODE_URL = "ws://127.0.0.1:8546"
SUBPROTOCOLS = ["eth"]
TIMEOUT = 5.0

payload = json.dumps(request("web3_clientVersion", id=1),
                     separators=(",", ":"))


async def exchange(url):
    async with websockets.connect(url, subprotocols=SUBPROTOCOLS) as websocket:
        print("WebSocket connected")
        await websocket.send(payload)
        print(f"> {payload}")

        resp = await websocket.recv()
        if isinstance(resp, bytes):
            resp = resp.decode("utf-8", errors="replace")
        print(f"< {resp}")
        return resp


async def probe(url=NODE_URL, timeout=TIMEOUT):
    print("Testing node WebSocket connection...")
    try:
        await asyncio.wait_for(exchange(url), timeout)
    except asyncio.TimeoutError:
        print("WebSocket connection timed out after %.1fs" % timeout)
        return 1
    except (OSError, websockets.exceptions.WebSocketException) as e:
        print("WebSocket connection failed: %s" % str(e))
        return 1
    print("Node WebSocket service is up")
    return 0


def main():
    sys.exit(asyncio.run(probe(NODE_URL, TIMEOUT)))


if __name__ == "__main__":
    main()
