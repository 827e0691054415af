# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
from typing import Dict, List, Mapping, Optional, Tuple, Union
from typing_extensions import TypedDict


# typing does not support recursion, so we must use forward references here (PEP484)
JSONSerializable = Union[
    Dict[str, "JSONSerializable"],
    List["JSONSerializable"],
    Tuple["JSONSerializable", ...],
    str,
    int,
    float,
    bool,
    None,
]

TwinPatch = Dict[str, JSONSerializable]
DesiredSettings = Mapping[str, Optional[str]]
ReportedSettings = Dict[str, str]


class HTTPResponse(TypedDict):
    status_code: int
    reason: str
    resp: str
