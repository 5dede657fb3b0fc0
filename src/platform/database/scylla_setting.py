"""
ScyllaDB connection management

One ScyllaDatabase instance owns the cluster and its pooled session. It is created by
the DI container and injected into every repository; nothing else holds a session.

Every statement goes through ``read`` or ``write`` so that:
- the consistency level is chosen per statement (quorum reads, serial conditional writes)
- every request carries a bounded timeout
- driver failures surface as StorageUnavailableError

Usage:
    database = ScyllaDatabase()
    await database.connect()
    result = await database.read('SELECT * FROM appsisted."user" WHERE username = %s', (name,))
"""

import asyncio
from collections.abc import Sequence
from typing import Any

from cassandra import (
    ConsistencyLevel,
    CoordinationFailure,
    OperationTimedOut,
    Timeout,
    Unavailable,
)
from cassandra.auth import PlainTextAuthProvider
from cassandra.cluster import (
    EXEC_PROFILE_DEFAULT,
    Cluster,
    ExecutionProfile,
    NoHostAvailable,
    Session,
)
from cassandra.connection import ConnectionException
from cassandra.policies import ExponentialReconnectionPolicy, WhiteListRoundRobinPolicy
from cassandra.protocol import IsBootstrappingErrorMessage, OverloadedErrorMessage, ServerError
from cassandra.query import SimpleStatement

from src.platform.config.core_setting import Settings, settings as default_settings
from src.platform.exception.exceptions import StorageUnavailableError
from src.platform.logging.loguru_io import Logger


def consistency_level_from_name(name: str) -> int:
    try:
        return getattr(ConsistencyLevel, name)
    except AttributeError:
        raise ValueError(f'Unknown consistency level: {name}') from None


class ScyllaDatabase:
    def __init__(self, *, settings: Settings = default_settings) -> None:
        self._settings = settings
        self._session: Session | None = None
        self.keyspace = settings.SCYLLA_KEYSPACE
        self.read_consistency = consistency_level_from_name(settings.SCYLLA_READ_CONSISTENCY)
        self.write_consistency = consistency_level_from_name(settings.SCYLLA_WRITE_CONSISTENCY)
        self.serial_consistency = consistency_level_from_name(settings.SCYLLA_SERIAL_CONSISTENCY)

    def _create_cluster(self) -> Cluster:
        """
        Create ScyllaDB cluster

        - WhiteList policy: only the configured contact points are used
        - Execution profile: default consistency and request timeout
        - Exponential reconnection so a restarting node is picked up again
        """
        auth_provider = PlainTextAuthProvider(
            username=self._settings.SCYLLA_USERNAME,
            password=self._settings.SCYLLA_PASSWORD.get_secret_value(),
        )
        default_profile = ExecutionProfile(
            load_balancing_policy=WhiteListRoundRobinPolicy(self._settings.SCYLLA_CONTACT_POINTS),
            consistency_level=self.write_consistency,
            serial_consistency_level=self.serial_consistency,
            request_timeout=self._settings.SCYLLA_REQUEST_TIMEOUT,
        )
        return Cluster(
            contact_points=self._settings.SCYLLA_CONTACT_POINTS,
            port=self._settings.SCYLLA_PORT,
            auth_provider=auth_provider,
            protocol_version=4,
            connect_timeout=self._settings.SCYLLA_CONNECT_TIMEOUT,
            control_connection_timeout=self._settings.SCYLLA_CONTROL_TIMEOUT,
            reconnection_policy=ExponentialReconnectionPolicy(base_delay=1, max_delay=30),
            execution_profiles={EXEC_PROFILE_DEFAULT: default_profile},
        )

    async def connect(self) -> Session:
        if self._session is not None:
            return self._session

        Logger.base.info(f'🔌 [ScyllaDB] Connecting to {self._settings.SCYLLA_CONTACT_POINTS}...')
        cluster = self._create_cluster()
        try:
            # Not bound to the keyspace: bootstrap has to run before it exists
            self._session = await asyncio.to_thread(cluster.connect)
        except NoHostAvailable as e:
            await asyncio.to_thread(cluster.shutdown)
            raise StorageUnavailableError(f'ScyllaDB unreachable: {e}') from e

        Logger.base.info(f'✅ [ScyllaDB] Session created (keyspace={self.keyspace})')
        return self._session

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StorageUnavailableError('ScyllaDB session is not connected')
        return self._session

    async def close(self) -> None:
        if self._session is None:
            return
        session, self._session = self._session, None
        await asyncio.to_thread(session.cluster.shutdown)
        Logger.base.info('🔌 [ScyllaDB] Session closed')

    async def warmup(self) -> bool:
        """Force connection establishment at startup instead of on the first request"""
        try:
            await self.read(
                'SELECT release_version FROM system.local',
                consistency_level=ConsistencyLevel.ONE,
            )
            Logger.base.info('✅ [ScyllaDB Warmup] Completed: connections ready')
            return True
        except StorageUnavailableError as e:
            Logger.base.error(f'❌ [ScyllaDB Warmup] Failed: {e}')
            return False

    def table(self, name: str) -> str:
        return f'{self.keyspace}."{name}"'

    async def read(
        self,
        query: str,
        parameters: Sequence[Any] | None = None,
        *,
        serial: bool = False,
        consistency_level: int | None = None,
    ) -> Any:
        """Quorum read by default; ``serial=True`` reads through Paxos and sees committed LWTs"""
        if consistency_level is None:
            consistency_level = self.serial_consistency if serial else self.read_consistency
        statement = SimpleStatement(query, consistency_level=consistency_level)
        return await self._execute(statement, parameters, conditional=False)

    async def write(
        self,
        query: str,
        parameters: Sequence[Any] | None = None,
        *,
        conditional: bool = False,
    ) -> Any:
        """``conditional=True`` marks an LWT (IF ...); its timeout leaves the outcome unknown"""
        statement = SimpleStatement(
            query,
            consistency_level=self.write_consistency,
            serial_consistency_level=self.serial_consistency if conditional else None,
        )
        return await self._execute(statement, parameters, conditional=conditional)

    async def _execute(
        self, statement: SimpleStatement, parameters: Sequence[Any] | None, *, conditional: bool
    ) -> Any:
        session = self.session
        try:
            response_future = session.execute_async(
                statement, parameters, timeout=self._settings.SCYLLA_REQUEST_TIMEOUT
            )
            return await asyncio.to_thread(response_future.result)
        except (OperationTimedOut, Timeout, CoordinationFailure) as e:
            raise StorageUnavailableError(
                f'ScyllaDB request did not complete: {e}', outcome_unknown=conditional
            ) from e
        except (ConnectionException, ServerError) as e:
            # The request may have reached a replica before the connection or node failed
            raise StorageUnavailableError(
                f'ScyllaDB request failed: {e}', outcome_unknown=conditional
            ) from e
        except (
            Unavailable,
            NoHostAvailable,
            OverloadedErrorMessage,
            IsBootstrappingErrorMessage,
        ) as e:
            # Rejected by the coordinator before any replica applied it
            raise StorageUnavailableError(f'ScyllaDB unavailable: {e}') from e
