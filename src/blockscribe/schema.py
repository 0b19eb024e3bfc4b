"""
Pydantic Schemas for Editor Snapshots.

The editor hands programs over as plain JSON-like dictionaries. These models
validate that shape and convert it into the `Block` / `Workspace` dataclasses
consumed by the generators.

Example::

    {
      "blocks": [
        {"type": "variables_set", "fields": {"VAR": "x"},
         "inputs": {"VALUE": {"type": "math_number", "fields": {"NUM": 3}}}}
      ]
    }
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from blockscribe.blocks import Block, Workspace, all_variables


class BlockModel(BaseModel):
  """
  Serialized form of a single block and everything connected below it.
  """

  model_config = ConfigDict(populate_by_name=True)

  kind: str = Field(..., alias="type", description="Block type tag (e.g. 'controls_if').")
  id: Optional[str] = Field(None, description="Stable block identifier.")
  fields: Dict[str, Any] = Field(default_factory=dict, description="Literal field values.")
  inputs: Dict[str, Optional["BlockModel"]] = Field(default_factory=dict, description="Value sockets.")
  statements: Dict[str, Optional["BlockModel"]] = Field(default_factory=dict, description="Statement sockets.")
  next: Optional["BlockModel"] = Field(None, description="Next statement in the chain.")
  comment: Optional[str] = Field(None, description="Author comment.")
  output: Optional[bool] = Field(
    None,
    description="Value-producing block. Defaults to True when plugged into a value socket, else False.",
  )
  disabled: bool = Field(False, description="Skip this block during generation.")
  mutation: Dict[str, Any] = Field(default_factory=dict, description="Shape data for mutable blocks.")

  def to_block(self, in_value_socket: bool = False) -> Block:
    """
    Converts the model (recursively) into a `Block`.

    Args:
        in_value_socket: True when this block is plugged into a value socket.

    Returns:
        Block: The dataclass tree.
    """
    output = self.output if self.output is not None else in_value_socket
    extra: Dict[str, Any] = {}
    if self.id is not None:
      extra["id"] = self.id
    return Block(
      kind=self.kind,
      fields=dict(self.fields),
      inputs={name: child.to_block(in_value_socket=True) if child else None for name, child in self.inputs.items()},
      statements={name: child.to_block() if child else None for name, child in self.statements.items()},
      next=self.next.to_block() if self.next else None,
      comment=self.comment,
      output=output,
      disabled=self.disabled,
      mutation=dict(self.mutation),
      **extra,
    )


class WorkspaceModel(BaseModel):
  """
  Serialized editor canvas.
  """

  blocks: List[BlockModel] = Field(default_factory=list, description="Top-level blocks in editor order.")
  variables: Optional[List[str]] = Field(
    None,
    description="Variable names known to the editor. Collected from the blocks when omitted.",
  )

  def to_workspace(self) -> Workspace:
    """
    Converts the model into a `Workspace`.

    Variables declared by the editor come first; any name only found while
    scanning the blocks is appended after them.

    Returns:
        Workspace: The snapshot ready for generation.
    """
    top_blocks = [b.to_block() for b in self.blocks]
    names = list(self.variables or [])
    for name in all_variables(top_blocks):
      if name not in names:
        names.append(name)
    return Workspace(top_blocks=top_blocks, variables=names)


BlockModel.model_rebuild()


def load_workspace(data: Dict[str, Any]) -> Workspace:
  """
  Validates an editor snapshot dictionary and builds a `Workspace`.

  Args:
      data: The snapshot (``{"blocks": [...], "variables": [...]}``).

  Returns:
      Workspace: The validated snapshot.

  Raises:
      pydantic.ValidationError: If the dictionary does not match the schema.
  """
  return WorkspaceModel.model_validate(data).to_workspace()
