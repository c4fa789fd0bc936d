#!/usr/bin/env python3
"""
regexform Demo - Serve the form with the strict pattern preset
"""
import asyncio

from regexform import regexform, FormPattern


async def main():
    """Simple regexform demo"""
    print("regexform Demo")

    app = regexform(FormPattern.strict(), verbose=True)
    await app.start()

    print(f"Started on {app.url}")

    try:
        while True:
            await asyncio.sleep(1)
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        await app.stop()
        print("Stopped")


if __name__ == "__main__":
    asyncio.run(main())
