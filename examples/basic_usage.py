"""Basic usage examples for the toys resolvers."""

import asyncio

from toys import AsyncIPResolver, IPResolver, SyncTransport, ToysError


def main() -> None:
    transport = SyncTransport()
    with IPResolver(transport) as resolver:
        print("=== Local network ===")
        print(f"  Local address: {resolver.local_network_address() or 'N/A'}")

        print("\n=== Public IP ===")
        try:
            info = resolver.public_ip_info()
        except ToysError as exc:
            print(f"  Lookup failed: {exc}")
            return
        print(f"  {info.query} - {info.region_name}, {info.country}")

        print("\n=== Location ===")
        address = resolver.address_info(info.query)
        print(f"  {address.display_name()}")

        # Needs OPENWEATHER_API_KEY in the environment
        print("\n=== Weather ===")
        try:
            snapshot = resolver.weather(info.lat, info.lon)
        except ToysError as exc:
            print(f"  Weather unavailable: {exc}")
        else:
            t = snapshot.temperature
            print(f"  {snapshot.summary or 'N/A'}: {t.temp}°C ({t.temp_min}-{t.temp_max}°C)")
            print(f"  Humidity: {t.humidity}%, Wind: {snapshot.wind.speed} m/s")
    transport.close()


async def main_async() -> None:
    async with AsyncIPResolver() as resolver:
        coords = await resolver.coordinates()
        print(f"\n=== Coordinates (async) ===\n  {coords or 'N/A'}")


if __name__ == "__main__":
    main()
    asyncio.run(main_async())
