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

"""Input and output operations for hcl2json.

Public API:

expand_patterns : function
    Expand file paths and glob patterns into an ordered file list.
read_documents : function
    Read files as (name, text) pairs.
read_stdin : function
    Read all of standard input.
write_output : function
    Write text to a file or stdout.

Example:
    from hcl2json.io import expand_patterns, read_documents

    paths = expand_patterns(["env/*.tfvars"])
    for name, text in read_documents(paths):
        print(name, len(text))

"""

from .sources import expand_patterns, read_documents, read_stdin, write_output

__all__ = ["expand_patterns", "read_documents", "read_stdin", "write_output"]
