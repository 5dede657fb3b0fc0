#!/usr/bin/env python3
"""
ScyllaDB Reset Script

1. Drop the keyspace (all users and parking sites are lost)
2. Recreate keyspace and tables, then seed the default parking sites

Equivalent to ``GET /schema/create`` on an empty cluster.
"""

import asyncio

from src.platform.config.di import container
from src.platform.exception.exceptions import StorageUnavailableError


async def reset_scylladb() -> list[str]:
    database = container.database()
    await database.connect()
    try:
        print(f'🗑️  Dropping keyspace {database.keyspace}...')
        await database.write(f'DROP KEYSPACE IF EXISTS {database.keyspace}')
        print(f'   ✅ Keyspace "{database.keyspace}" dropped')

        print('🏗️  Creating schema and seed sites...')
        tables = await container.bootstrap_schema_use_case().create_all_schema()
        print(f'   ✅ Tables ready: {", ".join(tables)}')
        return tables
    finally:
        await database.close()


async def main() -> None:
    print('🔄 Starting ScyllaDB reset...')
    print('=' * 50)

    try:
        await reset_scylladb()
    except StorageUnavailableError as e:
        print(f'❌ Reset failed: {e}')
        exit(1)

    print('=' * 50)
    print('✅ ScyllaDB reset completed!')


if __name__ == '__main__':
    asyncio.run(main())
