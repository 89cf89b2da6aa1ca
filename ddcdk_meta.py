#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

__name__ = "ddcdk"
__version__ = "0.1.0"
