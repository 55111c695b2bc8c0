"""
Example 03: Mapper Registry

This example demonstrates caching one mapper per target class.
"""

from dataclasses import dataclass

from morphkit import MapperRegistry


@dataclass
class Product:
    """Product model"""
    sku: str | None = None
    name: str | None = None
    price: float = 0.0


def main():
    registry = MapperRegistry()
    registry.register(Product, {"sku": "code", "price": lambda item: item["cents"] / 100})

    print("=== Mapper Registry ===\n")
    print(registry.map(Product, {"code": "A-1", "name": "Lamp", "cents": 1999}))
    print(registry.map(Product, [{"code": "B-2", "cents": 500}]))

    # Replace the schema later on
    registry.set_mapper(Product, {"sku": "id"})
    print(registry.map(Product, {"id": "C-3", "name": "Desk"}))

    registry.delete_mapper(Product)
    print(f"Registered: {registry.exists(Product)}")


if __name__ == "__main__":
    main()
