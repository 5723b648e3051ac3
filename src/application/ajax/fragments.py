"""View registry and fragment compilation.

A view is a named set of fragment declarations. Each declaration pairs an
element id (the fragment key shipped in the envelope) with the template that
renders it. The registry is deterministic: the same view name always yields
the same keys, in declaration order.

Templates receive:
    command: Command name.
    params: The request's declared parameters.
    order: The view data (the order summary after the optional operations
        ran, for the checkout commands).
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from src.application.ajax.context import RequestContext
from src.application.ajax.lifecycle import CompileStep
from src.domain.protocols.fragment_renderer_protocol import FragmentRendererProtocol

type ViewDataStep = Callable[[RequestContext, Any], Awaitable[Any]]


@dataclass(frozen=True, kw_only=True)
class FragmentDeclaration:
    """One fragment of a view.

    Attributes:
        key: Id of the element the fragment replaces.
        template: Template path relative to the template root.
    """

    key: str
    template: str


@dataclass(frozen=True, kw_only=True)
class ViewDefinition:
    """A named, ordered set of fragments re-rendered together."""

    name: str
    fragments: tuple[FragmentDeclaration, ...]

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(fragment.key for fragment in self.fragments)


_ORDER_SUMMARY = FragmentDeclaration(
    key="orderSummary", template="fragments/order_summary.html.j2"
)

VIEW_REGISTRY: Mapping[str, ViewDefinition] = MappingProxyType(
    {
        view.name: view
        for view in (
            ViewDefinition(
                name="ShippingAddressView",
                fragments=(
                    FragmentDeclaration(
                        key="shippingAddressSection",
                        template="fragments/shipping_address.html.j2",
                    ),
                    _ORDER_SUMMARY,
                ),
            ),
            ViewDefinition(
                name="OrderItemsView",
                fragments=(
                    FragmentDeclaration(
                        key="orderItems", template="fragments/order_items.html.j2"
                    ),
                    _ORDER_SUMMARY,
                ),
            ),
            ViewDefinition(
                name="GiftMessageView",
                fragments=(
                    FragmentDeclaration(
                        key="giftMessageSection",
                        template="fragments/gift_message.html.j2",
                    ),
                ),
            ),
        )
    }
)


class UnknownViewError(LookupError):
    """Raised when a view name is not in the registry."""


class FragmentCompiler:
    """Compile the fragments of a view with a FragmentRendererProtocol.

    Example:
        >>> compiler = FragmentCompiler(renderer)
        >>> compile_step = compiler.for_view("OrderItemsView")
        >>> fragments = await compile_step(context, order_summary)
        >>> list(fragments)
        ['orderItems', 'orderSummary']
    """

    def __init__(
        self,
        renderer: FragmentRendererProtocol,
        views: Mapping[str, ViewDefinition] = VIEW_REGISTRY,
    ) -> None:
        self._renderer = renderer
        self._views = views

    def view(self, view_name: str) -> ViewDefinition:
        """Resolve a view name.

        Raises:
            UnknownViewError: If the view is not registered.
        """
        try:
            return self._views[view_name]
        except KeyError:
            raise UnknownViewError(f"Unknown view: {view_name}") from None

    def for_view(
        self, view_name: str, *, load: ViewDataStep | None = None
    ) -> CompileStep:
        """Return the lifecycle compile step for a view.

        Args:
            view_name: Registered view name.
            load: Turns the primary operation's data into template data.
                When None, templates receive the data as is.

        Raises:
            UnknownViewError: If the view is not registered.
        """
        view = self.view(view_name)

        async def compile_fragments(
            context: RequestContext, data: Any
        ) -> Mapping[str, str]:
            if load is not None:
                data = await load(context, data)
            template_context = {
                "command": context.command_name,
                "params": dict(context.parameters),
                "order": data,
            }
            return {
                fragment.key: self._renderer.render(fragment.template, template_context)
                for fragment in view.fragments
            }

        return compile_fragments
