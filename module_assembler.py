"""
Elm Module Assembly

Builds the text of the generated Phosphor.elm: module header and docs, the
fixed supporting API, then one function per icon plus alias re-exports.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence

from catalog import IconCatalogEntry
from config import ICON_PREVIEW_URL
from weights import Weight

SUPPORT_EXPORTS = [
    "Icon, IconWeight(..), IconVariant, toHtml",
    "withClass, withSize, withSizeUnit",
    "customIcon",
]

MODULE_DOCS = """\
{-|


# Basic Usage

All icons have six weights; Regular, Thin, Light, Bold, Fill, and Duotone. Rendering an icon requires just a template and a weight:

    cube : Html msg
    cube =
        MODULE.cube Bold
            |> MODULE.toHtml []

Change `MODULE.cube` to the icon you prefer, a list of all icons is visible here: <https://phosphoricons.com>

All icons of this package are provided as the internal type `Icon`. To turn them into an `Html msg`, simply use the `toHtml` function.

@docs Icon, IconWeight, IconVariant, toHtml


# Customize Icons

Phosphor Icons are `1em` by default, and come with the class `ph-icon`.
To customize its class and size attributes simply use the `withClass` and `withSize` functions before turning them into Html with `toHtml`.

@docs withClass, withSize, withSizeUnit


# New Custom Icons

If you'd like to use same API while creating personally designed icons, you can use the `customIcon` function. You have to provide it with a `List (Svg Never)` that will be embedded into the icon.

@docs customIcon


# IconList

@docs ICON_NAMES

-}
"""

PRELUDE = """\
import Html exposing (Html)
import Json.Encode
import Svg as S exposing (Svg, svg)
import Svg.Attributes as A
import VirtualDom


{-| Visual variant of the icon
-}
type IconWeight
    = Thin
    | Light
    | Regular
    | Bold
    | Fill
    | Duotone


{-| Customizable attributes of an icon
-}
type alias IconAttributes =
    { size : Float
    , sizeUnit : String
    , class : Maybe String
    }


{-| Default attributes of the icon
-}
defaultAttributes : IconAttributes
defaultAttributes =
    { size = 1
    , sizeUnit = "em"
    , class = Just "ph-icon"
    }


{-| Type representing icon builder
-}
type alias Icon =
    IconWeight -> IconVariant


{-| Opaque type representing builder output
-}
type IconVariant
    = IconVariant
        { attrs : IconAttributes
        , src : List (Svg Never)
        }


{-| Build custom svg icon

    [ Svg.line [ x1 "21", y1 "10", x2 "3", y2 "10" ]
    , Svg.line [ x1 "21", y1 "6", x2 "3", y2 "6" ]
    , Svg.line [ x1 "21", y1 "14", x2 "3", y2 "14" ]
    , Svg.line [ x1 "21", y1 "18", x2 "3", y2 "18" ]
    ]
        |> customIcon
        |> withSize 26
        |> toHtml []

-}
customIcon : List (Svg Never) -> IconVariant
customIcon src =
    IconVariant
        { src = src
        , attrs = IconAttributes 1 "em" (Just "ph-icon custom")
        }


{-| Set size attribute of an icon

    MODULE.download Regular
        |> MODULE.withSize 10
        |> MODULE.toHtml []

-}
withSize : Float -> IconVariant -> IconVariant
withSize size (IconVariant { attrs, src }) =
    IconVariant { attrs = { attrs | size = size }, src = src }


{-| Set unit of size attribute of an icon, one of: "em", "ex", "px", "in", "cm", "mm", "pt", "pc", "%"

    MODULE.download Regular
        |> MODULE.withSize 50
        |> MODULE.withSizeUnit "%"
        |> MODULE.toHtml []

-}
withSizeUnit : String -> IconVariant -> IconVariant
withSizeUnit sizeUnit (IconVariant { attrs, src }) =
    IconVariant { attrs = { attrs | sizeUnit = sizeUnit }, src = src }


{-| Overwrite class attribute of an icon

    MODULE.download Regular
        |> MODULE.withClass "custom-clazz"
        |> MODULE.toHtml []

-}
withClass : String -> IconVariant -> IconVariant
withClass class (IconVariant { attrs, src }) =
    IconVariant { attrs = { attrs | class = Just class }, src = src }


{-| Build an icon, ready to use in html. It accepts list of svg attributes, for example in case if you want to add an event handler.

    MODULE.download Regular
        |> MODULE.withSize 10
        |> MODULE.withClass "custom-clazz"
        |> MODULE.toHtml [ onClick Download ]

-}
toHtml : List (S.Attribute msg) -> IconVariant -> Html msg
toHtml attributes (IconVariant { src, attrs }) =
    let
        strSize =
            attrs.size |> String.fromFloat

        baseAttributes =
            [ xmlns "http://www.w3.org/2000/svg"
            , A.fill "currentColor"
            , A.height <| strSize ++ attrs.sizeUnit
            , A.width <| strSize ++ attrs.sizeUnit
            , A.stroke "currentColor"
            , A.strokeLinecap "round"
            , A.strokeLinejoin "round"
            , A.viewBox "0 0 256 256"
            ]

        combinedAttributes =
            (case attrs.class of
                Just c ->
                    A.class c :: baseAttributes

                Nothing ->
                    baseAttributes
            )
                ++ attributes
    in
    src
        |> List.map (S.map never)
        |> svg combinedAttributes


xmlns : String -> S.Attribute a
xmlns s =
    VirtualDom.property "xmlns" <| Json.Encode.string s


makeBuilder : List (Svg Never) -> IconVariant
makeBuilder src =
    IconVariant { attrs = defaultAttributes, src = src }


"""


@dataclass(frozen=True)
class GeneratedIcon:
    """An icon that passed every check, with one rendered element list per weight"""
    entry: IconCatalogEntry
    elements: Dict[Weight, str]

    @property
    def exported_names(self) -> List[str]:
        return self.entry.exported_names


def _preview_doc(name: str, slug: str) -> str:
    return f"{{-| ![{name}]({ICON_PREVIEW_URL}/{slug}.svg)\n-}}\n"


def render_icon_function(icon: GeneratedIcon) -> str:
    name = icon.entry.camel_name
    lines = [
        _preview_doc(name, icon.entry.name),
        f"{name} : Icon\n",
        f"{name} weight =\n",
        "    let\n",
        "        elements =\n",
        "            case weight of\n",
    ]
    for weight in Weight:
        lines.append(f"                {weight.label} ->\n")
        lines.append(f"                    {icon.elements[weight]}\n\n")
    lines.append("    in\n")
    lines.append("    makeBuilder elements\n\n\n")
    return "".join(lines)


def render_alias(entry: IconCatalogEntry) -> str:
    """One-line re-export of the aliased icon"""
    alias = entry.alias.camel_name
    return (
        _preview_doc(alias, entry.name)
        + f"{alias} : Icon\n"
        + f"{alias} =\n"
        + f"    {entry.camel_name}\n\n\n"
    )


def render_header(names: Sequence[str], module_name: str) -> str:
    exports = SUPPORT_EXPORTS + list(names)
    header = f"module {module_name} exposing\n    ( " + "\n    , ".join(exports) + "\n    )\n\n"
    docs = MODULE_DOCS.replace("ICON_NAMES", ", ".join(names)) if names else MODULE_DOCS.replace("\n@docs ICON_NAMES\n", "")
    return header + docs.replace("MODULE", module_name) + "\n"


def assemble_module(icons: Sequence[GeneratedIcon], module_name: str = "Phosphor") -> str:
    """
    Assemble the complete generated Elm module.

    Args:
        icons: Successfully generated icons, in output order
        module_name: Elm module name

    Returns:
        Elm source text
    """
    names = [name for icon in icons for name in icon.exported_names]

    chunks = [render_header(names, module_name), PRELUDE.replace("MODULE", module_name)]
    for icon in icons:
        chunks.append(render_icon_function(icon))
        if icon.entry.alias:
            chunks.append(render_alias(icon.entry))

    return "".join(chunks)
