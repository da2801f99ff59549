"""Drives symbol resolution and schema capture over a stream of instances."""

import logging
import threading
from collections.abc import Iterable

from hashrecover.models import EntityInstance, FieldDescriptor
from hashrecover.resolution_result import ResolutionResult
from hashrecover.run_summary import RunSummary
from hashrecover.schema_synthesizer import SchemaSynthesizer
from hashrecover.symbol import Symbol
from hashrecover.symbol_resolver import SymbolResolver

logger = logging.getLogger(__name__)


class RunAggregator:
    """Resolves every entity and field name and collects run statistics."""

    def __init__(
        self,
        resolver: SymbolResolver,
        synthesizer: SchemaSynthesizer,
        workers: int = 1,
    ) -> None:
        """Initialize the aggregator with its resolver and schema synthesizer."""
        self.resolver = resolver
        self.synthesizer = synthesizer
        self.workers = workers

        # Ordered distinct names, fallbacks included.
        self.entity_names: dict[str, None] = {}
        self.field_names: dict[str, None] = {}
        self.unresolved: set[str] = set()
        self.instances = 0

        self._pre_resolved: dict[Symbol, ResolutionResult] = {}
        self._lock = threading.Lock()

    def process(self, instances: Iterable[EntityInstance]) -> None:
        """Consume a stream of instances in order.

        The candidate dictionary must not grow while this runs.
        """
        if self.workers <= 1:
            for instance in instances:
                self.add_instance(instance)
            return

        instances = list(instances)
        self._pre_resolve(instances)
        try:
            for instance in instances:
                self.add_instance(instance)
        finally:
            # Pre-resolved results go stale once the dictionary grows.
            self._pre_resolved.clear()

    def add_instance(self, instance: EntityInstance) -> None:
        """Resolve one instance and capture its schema if its type is new."""
        entity = self._resolve(instance.entity)
        key = entity.display_name
        with self._lock:
            self.instances += 1
            if not entity.resolved:
                self._mark_unresolved(key, "object")
            self.entity_names.setdefault(key, None)
            capture = self.synthesizer.begin(key)

        for symbol, type_tag in instance.fields:
            result = self._resolve(symbol)
            name = result.display_name
            with self._lock:
                if not result.resolved:
                    self._mark_unresolved(name, "variable")
                self.field_names.setdefault(name, None)
            if capture:
                self.synthesizer.record_field(key, FieldDescriptor(name, type_tag))

        if capture:
            with self._lock:
                self.synthesizer.seal(key)

    def summary(self) -> RunSummary:
        """Finalize schemas and return the run's counts."""
        schemas = self.synthesizer.finalize()
        with self._lock:
            return RunSummary(
                entity_types=len(self.entity_names),
                field_names=len(self.field_names),
                instances=self.instances,
                unresolved=sorted(self.unresolved),
                schemas=schemas,
            )

    def _resolve(self, symbol: Symbol) -> ResolutionResult:
        cached = self._pre_resolved.get(symbol)
        if cached is not None:
            return cached
        return self.resolver.resolve(symbol)

    def _pre_resolve(self, instances: list[EntityInstance]) -> None:
        """Resolve all digest-only symbols up front across worker threads."""
        pending: dict[Symbol, None] = {}
        for instance in instances:
            if instance.entity.using_hash:
                pending.setdefault(instance.entity, None)
            for symbol, _ in instance.fields:
                if symbol.using_hash:
                    pending.setdefault(symbol, None)

        results = self.resolver.resolve_many(pending, workers=self.workers)
        self._pre_resolved.update(zip(pending, results, strict=True))
        logger.info(
            "Pre-resolved %d digest-only symbols with %d workers",
            len(results),
            self.workers,
        )

    def _mark_unresolved(self, name: str, what: str) -> None:
        # Caller holds the lock.
        if name in self.unresolved:
            logger.debug("Unknown %s name %s", what, name)
            return
        self.unresolved.add(name)
        logger.warning("Unknown %s name %s", what, name)
