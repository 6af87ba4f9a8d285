# hexen

Guards and checks for neuromorphic brain–computer-interface upgrade workflows:
evidence bundles, host budgets, viability kernels, risk-of-harm (RoH) models,
organic-CPU envelopes, update proposals and a JSON Lines evolution log.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Write a YAML manifest naming the default BCI upgrade (`upgrade: bci-safe-001`)
to the given path, `evolution_manifest.yaml` by default:

```
hexen-evolution --ci-manifest evolution_manifest.yaml
```

Log, at INFO level, the backend the client would connect to
(`http://localhost:8080` by default), then exit:

```
hexen-xbox-client --backend http://localhost:8080
```

## Library overview

- `hexen.upgrade_store`: `HostBudget`, `EvidenceTag`, `EvidenceBundle`,
  `UpgradeDescriptor` and `default_bci_upgrade()`. Evidence puts no load on a
  host, so `EvidenceBundle.within_budget(budget)` accepts any budget.
- `hexen.evidence_registry`: `EvidenceRegistry.is_bundle_satisfied(bundle)` is
  true when the bundle carries at least one tag.
- `hexen.security`: `NeurorightsGuard(registry, budget).validate_bundle(bundle)`
  combines the registry check with the budget check.
- `hexen.neurotask`: `NeurotaskEnvelope` and `within_budget(envelope, budget)`,
  comparing the estimated duty cycle with the budget's ceiling.
- `hexen.bci_snapshot`: `BciHostSnapshot.within(thresholds)`, bounds inclusive.
- `hexen.schema_validate`: `validate_against_schema(instance, schema)` checks
  against a Draft 7 JSON Schema and raises `SchemaValidationError` (with an
  `errors` list) for an invalid schema or a failing instance.
- `hexen.viability`: `SwarmState7D`, `LifeforceState` and `ViabilityKernel`,
  with `is_viable(state, lifeforce)` and `safe_filter(state, lifeforce, nominal)`,
  which zeroes every control outside the kernel.
- `hexen.cyberrank`: `RankVector`, `CandidateAction`, `RankWeights.score(rank)`
  and `tsafe_select(candidates, weights)`, which returns the best-scoring viable
  candidate (the later one on ties) or `None`.
- `hexen.organic_cpu`: `OrganicCpuEnvelope.validate_state(state)` raises
  `EnvelopeViolation` (with `kind`, `current`, `limit`) for the first bound a
  `BioState` breaks; `OrganicCpuCore.tick(state)` checks a state and
  `tighten_envelope(new_env)` only ever tightens.
- `hexen.roh_model`: `RohModelShard.compute_roh(inputs)` (clamped to [0, 1]),
  `roh_ceiling()` and `validate_invariants()`, which raises `RohInvariantError`
  unless the ceiling is 0.30 and the weights are non-negative and sum to 1.
- `hexen.ocpu_profile`: `OrganicCpuProfileSpec.from_dict(data)` reads the
  camelCase spec, `OcpuProfileAln.from_spec(spec)`, `to_envelope()` and
  `validate()`, which raises `ProfileError` for a ceiling above 0.30.
- `hexen.evolvestream`: `EffectBounds`, `EvolutionProposalRecord` (`to_dict`,
  `from_dict`) and `JsonlEvolutionLog` with `read_all(reader)`, skipping blank
  lines, and `append(writer, record)`, writing one compact JSON line.
- `hexen.proposals`: `Scope`, `TokenKind`, `EnvelopeBounds.is_monotone()`,
  `UpdateProposal` and `NeuroRightsPolicy`.
- `hexen.backend_config`: `load(environ)` reads a `ServiceConfig` from
  environment variables such as `HOST_BUDGET__MAX_POWER_W` (case-insensitive,
  nested with `__`), falling back to built-in defaults if any field is missing
  or malformed; `listen_addr(environ)` returns `(ip, port)` or raises `ValueError`.
- `hexen.neuron_safety`: `NeuronSafetyConfig.validate()` returns the config or
  raises `NeuronSafetyError`.
- `hexen.approval`: `handle_approval(request)` and the WSGI `app` serving
  `POST /api/approval`. Every request is currently declined with the reason
  that the upgrade requires an evidence bundle.
- `hexen.hud`: `hud_snapshot(kernel)` returning a `HudSnapshot` with a fixed
  swarm state and lifeforce and the kernel's mode; `to_dict()` gives its JSON form.

## Example

```python
from hexen.upgrade_store import HostBudget, default_bci_upgrade
from hexen.evidence_registry import EvidenceRegistry
from hexen.security import NeurorightsGuard

guard = NeurorightsGuard(EvidenceRegistry(), HostBudget(0.35, 39.0, 5.0))
upgrade = default_bci_upgrade()
assert guard.validate_bundle(upgrade.required_evidence)
```

The approval endpoint can be served with any WSGI server, for instance:

```python
from wsgiref.simple_server import make_server
from hexen.approval import app

make_server("127.0.0.1", 8080, app).serve_forever()
```

## What the package does not do

- It ships no running backend service: there are no health or readiness
  endpoints, no request tracing and no metrics export. Only the approval
  endpoint exists, as a WSGI application you serve yourself.
- The HUD snapshot is built in memory only; nothing serves it over HTTP.
- `hexen-xbox-client` does not open a connection; it only logs the backend URL.
- There is no background task scheduler or message-queue worker.
- There is no sovereignty decision engine that combines the RoH model,
  viability kernel, ranking and evolution log into a single allow/reject
  verdict; those pieces are provided separately.