# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Version gate policies for artiver.

Modules:

gates : module
    Minimum-version gates checked against artifact file names.

Public API:

VersionGate : class
    Minimum version for one artifact.
GateResult : class
    Outcome of checking one gate.
check_version : function
    Check one found version against a gate.
evaluate_gates : function
    Check gates against a directory listing.

Example:
    from artiver.policy import VersionGate, evaluate_gates
    from artiver.versioning import parse

    results = evaluate_gates(
        [VersionGate("jahia-api", parse("6.7"))],
        ["jahia-api-6.7.0.0-SNAPSHOT.jar"],
    )
    print(results[0].status)  # snapshot

"""

from .gates import GateResult, GateStatus, VersionGate, check_version, evaluate_gates

__all__ = ["GateResult", "GateStatus", "VersionGate", "check_version", "evaluate_gates"]
