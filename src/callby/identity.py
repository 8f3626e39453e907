#
# Copyright 2026 The callby Authors
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
#
from typing import Any, NewType

IdentityToken = NewType("IdentityToken", int)


def identity_of(reference: Any) -> IdentityToken:
    """Returns a token of the storage the reference points to, not of its value.

    Two references to the same object give the same token, equal but distinct
    objects give different tokens while both are alive. Only meant for
    diagnostic output, never for equality or hashing of values.
    """
    return IdentityToken(id(reference))
