from __future__ import annotations

from typing import NamedTuple

"""Static HSN / SAC classification tables.

Goods (HSN) nest as chapter (2 digits) -> heading (4) -> sub-heading (6) ->
tariff item (8). Services (SAC, prefix "99") nest as group (4 digits) ->
service (6). Rates are suggested GST percentages and may be absent.
"""


class Chapter(NamedTuple):
    code: str
    description: str
    section: int
    section_name: str


class HSNEntry(NamedTuple):
    code: str
    description: str
    gst_rate: float | None = None


SAC_PREFIX = "99"

HSN_CHAPTERS: dict[str, Chapter] = {
    "01": Chapter("01", "Live animals", 1, "Live Animals; Animal Products"),
    "02": Chapter("02", "Meat and edible meat offal", 1, "Live Animals; Animal Products"),
    "03": Chapter("03", "Fish and crustaceans, molluscs and other aquatic invertebrates", 1, "Live Animals; Animal Products"),
    "04": Chapter("04", "Dairy produce; birds' eggs; natural honey; edible products of animal origin", 1, "Live Animals; Animal Products"),
    "05": Chapter("05", "Products of animal origin, not elsewhere specified or included", 1, "Live Animals; Animal Products"),
    "06": Chapter("06", "Live trees and other plants; bulbs, roots and the like; cut flowers", 2, "Vegetable Products"),
    "07": Chapter("07", "Edible vegetables and certain roots and tubers", 2, "Vegetable Products"),
    "08": Chapter("08", "Edible fruit and nuts; peel of citrus fruit or melons", 2, "Vegetable Products"),
    "09": Chapter("09", "Coffee, tea, mate and spices", 2, "Vegetable Products"),
    "10": Chapter("10", "Cereals", 2, "Vegetable Products"),
    "11": Chapter("11", "Products of the milling industry; malt; starches; inulin; wheat gluten", 2, "Vegetable Products"),
    "12": Chapter("12", "Oil seeds and oleaginous fruits; miscellaneous grains, seeds and fruit", 2, "Vegetable Products"),
    "13": Chapter("13", "Lac; gums, resins and other vegetable saps and extracts", 2, "Vegetable Products"),
    "14": Chapter("14", "Vegetable plaiting materials; vegetable products not elsewhere specified", 2, "Vegetable Products"),
    "15": Chapter("15", "Animal or vegetable fats and oils and their cleavage products", 3, "Animal or Vegetable Fats and Oils"),
    "16": Chapter("16", "Preparations of meat, of fish or of crustaceans, molluscs", 4, "Prepared Foodstuffs; Beverages, Spirits; Tobacco"),
    "17": Chapter("17", "Sugars and sugar confectionery", 4, "Prepared Foodstuffs; Beverages, Spirits; Tobacco"),
    "18": Chapter("18", "Cocoa and cocoa preparations", 4, "Prepared Foodstuffs; Beverages, Spirits; Tobacco"),
    "19": Chapter("19", "Preparations of cereals, flour, starch or milk; pastrycooks' products", 4, "Prepared Foodstuffs; Beverages, Spirits; Tobacco"),
    "20": Chapter("20", "Preparations of vegetables, fruit, nuts or other parts of plants", 4, "Prepared Foodstuffs; Beverages, Spirits; Tobacco"),
    "21": Chapter("21", "Miscellaneous edible preparations", 4, "Prepared Foodstuffs; Beverages, Spirits; Tobacco"),
    "22": Chapter("22", "Beverages, spirits and vinegar", 4, "Prepared Foodstuffs; Beverages, Spirits; Tobacco"),
    "23": Chapter("23", "Residues and waste from the food industries; prepared animal fodder", 4, "Prepared Foodstuffs; Beverages, Spirits; Tobacco"),
    "24": Chapter("24", "Tobacco and manufactured tobacco substitutes", 4, "Prepared Foodstuffs; Beverages, Spirits; Tobacco"),
    "25": Chapter("25", "Salt; sulphur; earths and stone; plastering materials, lime and cement", 5, "Mineral Products"),
    "26": Chapter("26", "Ores, slag and ash", 5, "Mineral Products"),
    "27": Chapter("27", "Mineral fuels, mineral oils and products of their distillation", 5, "Mineral Products"),
    "28": Chapter("28", "Inorganic chemicals; organic or inorganic compounds of precious metals", 6, "Products of Chemical Industries"),
    "29": Chapter("29", "Organic chemicals", 6, "Products of Chemical Industries"),
    "30": Chapter("30", "Pharmaceutical products", 6, "Products of Chemical Industries"),
    "31": Chapter("31", "Fertilisers", 6, "Products of Chemical Industries"),
    "32": Chapter("32", "Tanning or dyeing extracts; tannins; dyes, pigments; paints and varnishes", 6, "Products of Chemical Industries"),
    "33": Chapter("33", "Essential oils and resinoids; perfumery, cosmetic or toilet preparations", 6, "Products of Chemical Industries"),
    "34": Chapter("34", "Soap, organic surface-active agents; washing preparations; lubricating preparations", 6, "Products of Chemical Industries"),
    "35": Chapter("35", "Albuminoidal substances; modified starches; glues; enzymes", 6, "Products of Chemical Industries"),
    "36": Chapter("36", "Explosives; pyrotechnic products; matches; pyrophoric alloys", 6, "Products of Chemical Industries"),
    "37": Chapter("37", "Photographic or cinematographic goods", 6, "Products of Chemical Industries"),
    "38": Chapter("38", "Miscellaneous chemical products", 6, "Products of Chemical Industries"),
    "39": Chapter("39", "Plastics and articles thereof", 7, "Plastics and Articles thereof; Rubber"),
    "40": Chapter("40", "Rubber and articles thereof", 7, "Plastics and Articles thereof; Rubber"),
    "41": Chapter("41", "Raw hides and skins (other than furskins) and leather", 8, "Raw Hides, Skins, Leather"),
    "42": Chapter("42", "Articles of leather; saddlery and harness; travel goods, handbags", 8, "Raw Hides, Skins, Leather"),
    "43": Chapter("43", "Furskins and artificial fur; manufactures thereof", 8, "Raw Hides, Skins, Leather"),
    "44": Chapter("44", "Wood and articles of wood; wood charcoal", 9, "Wood and Articles of Wood"),
    "45": Chapter("45", "Cork and articles of cork", 9, "Wood and Articles of Wood"),
    "46": Chapter("46", "Manufactures of straw, of esparto or of other plaiting materials", 9, "Wood and Articles of Wood"),
    "47": Chapter("47", "Pulp of wood or of other fibrous cellulosic material", 10, "Pulp of Wood; Paper and Paperboard"),
    "48": Chapter("48", "Paper and paperboard; articles of paper pulp, of paper or of paperboard", 10, "Pulp of Wood; Paper and Paperboard"),
    "49": Chapter("49", "Printed books, newspapers, pictures and other products of printing", 10, "Pulp of Wood; Paper and Paperboard"),
    "50": Chapter("50", "Silk", 11, "Textiles and Textile Articles"),
    "51": Chapter("51", "Wool, fine or coarse animal hair; horsehair yarn and woven fabric", 11, "Textiles and Textile Articles"),
    "52": Chapter("52", "Cotton", 11, "Textiles and Textile Articles"),
    "53": Chapter("53", "Other vegetable textile fibres; paper yarn and woven fabrics", 11, "Textiles and Textile Articles"),
    "54": Chapter("54", "Man-made filaments; strip of man-made textile materials", 11, "Textiles and Textile Articles"),
    "55": Chapter("55", "Man-made staple fibres", 11, "Textiles and Textile Articles"),
    "56": Chapter("56", "Wadding, felt and nonwovens; special yarns; twine, cordage, ropes", 11, "Textiles and Textile Articles"),
    "57": Chapter("57", "Carpets and other textile floor coverings", 11, "Textiles and Textile Articles"),
    "58": Chapter("58", "Special woven fabrics; tufted textile fabrics; lace; tapestries", 11, "Textiles and Textile Articles"),
    "59": Chapter("59", "Impregnated, coated, covered or laminated textile fabrics", 11, "Textiles and Textile Articles"),
    "60": Chapter("60", "Knitted or crocheted fabrics", 11, "Textiles and Textile Articles"),
    "61": Chapter("61", "Articles of apparel and clothing accessories, knitted or crocheted", 11, "Textiles and Textile Articles"),
    "62": Chapter("62", "Articles of apparel and clothing accessories, not knitted or crocheted", 11, "Textiles and Textile Articles"),
    "63": Chapter("63", "Other made up textile articles; sets; worn clothing and worn textile articles", 11, "Textiles and Textile Articles"),
    "64": Chapter("64", "Footwear, gaiters and the like; parts of such articles", 12, "Footwear, Headgear, Umbrellas"),
    "65": Chapter("65", "Headgear and parts thereof", 12, "Footwear, Headgear, Umbrellas"),
    "66": Chapter("66", "Umbrellas, sun umbrellas, walking-sticks, seat-sticks, whips", 12, "Footwear, Headgear, Umbrellas"),
    "67": Chapter("67", "Prepared feathers and down; artificial flowers; articles of human hair", 12, "Footwear, Headgear, Umbrellas"),
    "68": Chapter("68", "Articles of stone, plaster, cement, asbestos, mica or similar materials", 13, "Articles of Stone, Plaster, Cement, Ceramics, Glass"),
    "69": Chapter("69", "Ceramic products", 13, "Articles of Stone, Plaster, Cement, Ceramics, Glass"),
    "70": Chapter("70", "Glass and glassware", 13, "Articles of Stone, Plaster, Cement, Ceramics, Glass"),
    "71": Chapter("71", "Natural or cultured pearls, precious or semi-precious stones, precious metals", 14, "Natural or Cultured Pearls, Precious Stones"),
    "72": Chapter("72", "Iron and steel", 15, "Base Metals and Articles of Base Metal"),
    "73": Chapter("73", "Articles of iron or steel", 15, "Base Metals and Articles of Base Metal"),
    "74": Chapter("74", "Copper and articles thereof", 15, "Base Metals and Articles of Base Metal"),
    "75": Chapter("75", "Nickel and articles thereof", 15, "Base Metals and Articles of Base Metal"),
    "76": Chapter("76", "Aluminium and articles thereof", 15, "Base Metals and Articles of Base Metal"),
    "77": Chapter("77", "Reserved for possible future use", 15, "Base Metals and Articles of Base Metal"),
    "78": Chapter("78", "Lead and articles thereof", 15, "Base Metals and Articles of Base Metal"),
    "79": Chapter("79", "Zinc and articles thereof", 15, "Base Metals and Articles of Base Metal"),
    "80": Chapter("80", "Tin and articles thereof", 15, "Base Metals and Articles of Base Metal"),
    "81": Chapter("81", "Other base metals; cermets; articles thereof", 15, "Base Metals and Articles of Base Metal"),
    "82": Chapter("82", "Tools, implements, cutlery, spoons and forks, of base metal", 15, "Base Metals and Articles of Base Metal"),
    "83": Chapter("83", "Miscellaneous articles of base metal", 15, "Base Metals and Articles of Base Metal"),
    "84": Chapter("84", "Nuclear reactors, boilers, machinery and mechanical appliances", 16, "Machinery and Mechanical Appliances; Electrical Equipment"),
    "85": Chapter("85", "Electrical machinery and equipment and parts thereof", 16, "Machinery and Mechanical Appliances; Electrical Equipment"),
    "86": Chapter("86", "Railway or tramway locomotives, rolling-stock and parts thereof", 17, "Vehicles, Aircraft, Vessels"),
    "87": Chapter("87", "Vehicles other than railway or tramway rolling-stock, and parts", 17, "Vehicles, Aircraft, Vessels"),
    "88": Chapter("88", "Aircraft, spacecraft, and parts thereof", 17, "Vehicles, Aircraft, Vessels"),
    "89": Chapter("89", "Ships, boats and floating structures", 17, "Vehicles, Aircraft, Vessels"),
    "90": Chapter("90", "Optical, photographic, cinematographic, measuring, checking instruments", 18, "Optical, Photographic, Medical Instruments"),
    "91": Chapter("91", "Clocks and watches and parts thereof", 18, "Optical, Photographic, Medical Instruments"),
    "92": Chapter("92", "Musical instruments; parts and accessories of such articles", 18, "Optical, Photographic, Medical Instruments"),
    "93": Chapter("93", "Arms and ammunition; parts and accessories thereof", 19, "Arms and Ammunition"),
    "94": Chapter("94", "Furniture; bedding, mattresses; lamps and lighting fittings", 20, "Miscellaneous Manufactured Articles"),
    "95": Chapter("95", "Toys, games and sports requisites; parts and accessories thereof", 20, "Miscellaneous Manufactured Articles"),
    "96": Chapter("96", "Miscellaneous manufactured articles", 20, "Miscellaneous Manufactured Articles"),
    "97": Chapter("97", "Works of art, collectors' pieces and antiques", 21, "Works of Art, Collectors' Pieces and Antiques"),
    "98": Chapter("98", "Project imports; laboratory chemicals", 21, "Special Classifications"),
    "99": Chapter("99", "Services (SAC codes)", 21, "Services"),
}

HSN_HEADINGS: dict[str, HSNEntry] = {
    "0401": HSNEntry("0401", "Milk and cream, not concentrated nor sweetened", 0),
    "0402": HSNEntry("0402", "Milk and cream, concentrated or sweetened", 5),
    "0405": HSNEntry("0405", "Butter and other fats derived from milk", 12),
    "0406": HSNEntry("0406", "Cheese and curd", 12),
    "0409": HSNEntry("0409", "Natural honey", 5),
    "0701": HSNEntry("0701", "Potatoes, fresh or chilled", 0),
    "0713": HSNEntry("0713", "Dried leguminous vegetables, shelled", 0),
    "0801": HSNEntry("0801", "Coconuts, Brazil nuts and cashew nuts", 5),
    "0902": HSNEntry("0902", "Tea, whether or not flavoured", 5),
    "0904": HSNEntry("0904", "Pepper; dried or crushed capsicum", 5),
    "0910": HSNEntry("0910", "Ginger, saffron, turmeric, thyme and other spices", 5),
    "1001": HSNEntry("1001", "Wheat and meslin", 0),
    "1006": HSNEntry("1006", "Rice", 5),
    "1101": HSNEntry("1101", "Wheat or meslin flour", 5),
    "1507": HSNEntry("1507", "Soya-bean oil and its fractions", 5),
    "1701": HSNEntry("1701", "Cane or beet sugar", 5),
    "1704": HSNEntry("1704", "Sugar confectionery not containing cocoa", 18),
    "1806": HSNEntry("1806", "Chocolate and other food preparations containing cocoa", 18),
    "1905": HSNEntry("1905", "Bread, pastry, cakes, biscuits and other bakers' wares", 18),
    "2106": HSNEntry("2106", "Food preparations not elsewhere specified", 18),
    "2201": HSNEntry("2201", "Waters, including natural or artificial mineral waters", 18),
    "2202": HSNEntry("2202", "Waters with added sugar or flavour; non-alcoholic beverages", 28),
    "2402": HSNEntry("2402", "Cigars, cheroots, cigarillos and cigarettes", 28),
    "2523": HSNEntry("2523", "Portland cement, aluminous cement and similar hydraulic cements", 28),
    "2710": HSNEntry("2710", "Petroleum oils, other than crude", 18),
    "2711": HSNEntry("2711", "Petroleum gases and other gaseous hydrocarbons", 5),
    "3004": HSNEntry("3004", "Medicaments in measured doses or packed for retail sale", 12),
    "3208": HSNEntry("3208", "Paints and varnishes in a non-aqueous medium", 18),
    "3209": HSNEntry("3209", "Paints and varnishes in an aqueous medium", 18),
    "3304": HSNEntry("3304", "Beauty or make-up preparations", 18),
    "3305": HSNEntry("3305", "Preparations for use on the hair", 18),
    "3401": HSNEntry("3401", "Soap; organic surface-active products in bars or cakes", 18),
    "3402": HSNEntry("3402", "Organic surface-active agents; washing preparations", 18),
    "3403": HSNEntry("3403", "Lubricating preparations", 18),
    "3506": HSNEntry("3506", "Prepared glues and other prepared adhesives", 18),
    "3808": HSNEntry("3808", "Insecticides, fungicides, herbicides and disinfectants", 18),
    "3917": HSNEntry("3917", "Tubes, pipes and hoses of plastics", 18),
    "3920": HSNEntry("3920", "Other plates, sheets, film, foil and strip of plastics", 18),
    "3923": HSNEntry("3923", "Articles for the conveyance or packing of goods, of plastics", 18),
    "3926": HSNEntry("3926", "Other articles of plastics", 18),
    "4011": HSNEntry("4011", "New pneumatic tyres, of rubber", 28),
    "4016": HSNEntry("4016", "Other articles of vulcanised rubber", 18),
    "4202": HSNEntry("4202", "Trunks, suitcases, handbags and similar containers", 18),
    "4418": HSNEntry("4418", "Builders' joinery and carpentry of wood", 18),
    "4802": HSNEntry("4802", "Uncoated paper and paperboard for writing or printing", 12),
    "4819": HSNEntry("4819", "Cartons, boxes, cases and bags of paper or paperboard", 18),
    "4820": HSNEntry("4820", "Registers, account books, notebooks and diaries", 18),
    "4901": HSNEntry("4901", "Printed books, brochures, leaflets", 0),
    "5208": HSNEntry("5208", "Woven fabrics of cotton", 5),
    "6109": HSNEntry("6109", "T-shirts, singlets and other vests, knitted or crocheted", 5),
    "6203": HSNEntry("6203", "Men's or boys' suits, jackets, trousers", 12),
    "6204": HSNEntry("6204", "Women's or girls' suits, jackets, dresses, skirts", 12),
    "6302": HSNEntry("6302", "Bed linen, table linen, toilet linen and kitchen linen", 12),
    "6403": HSNEntry("6403", "Footwear with outer soles of rubber, plastics or leather", 18),
    "6810": HSNEntry("6810", "Articles of cement, of concrete or of artificial stone", 18),
    "6907": HSNEntry("6907", "Ceramic flags and paving, hearth or wall tiles", 18),
    "7010": HSNEntry("7010", "Carboys, bottles, flasks, jars and other containers of glass", 18),
    "7113": HSNEntry("7113", "Articles of jewellery and parts thereof", 3),
    "7208": HSNEntry("7208", "Flat-rolled products of iron or non-alloy steel, hot-rolled", 18),
    "7214": HSNEntry("7214", "Other bars and rods of iron or non-alloy steel", 18),
    "7306": HSNEntry("7306", "Other tubes, pipes and hollow profiles of iron or steel", 18),
    "7308": HSNEntry("7308", "Structures and parts of structures of iron or steel", 18),
    "7318": HSNEntry("7318", "Screws, bolts, nuts, washers and similar articles of iron or steel", 18),
    "7326": HSNEntry("7326", "Other articles of iron or steel", 18),
    "7408": HSNEntry("7408", "Copper wire", 18),
    "7606": HSNEntry("7606", "Aluminium plates, sheets and strip", 18),
    "8202": HSNEntry("8202", "Hand saws; blades for saws of all kinds", 18),
    "8205": HSNEntry("8205", "Hand tools not elsewhere specified", 18),
    "8207": HSNEntry("8207", "Interchangeable tools for hand tools or machine-tools", 18),
    "8301": HSNEntry("8301", "Padlocks and locks of base metal", 18),
    "8407": HSNEntry("8407", "Spark-ignition reciprocating or rotary internal combustion engines", 28),
    "8408": HSNEntry("8408", "Compression-ignition internal combustion piston engines", 28),
    "8409": HSNEntry("8409", "Parts for engines of heading 8407 or 8408", 28),
    "8413": HSNEntry("8413", "Pumps for liquids; liquid elevators", 18),
    "8414": HSNEntry("8414", "Air or vacuum pumps, air or other gas compressors and fans", 18),
    "8415": HSNEntry("8415", "Air conditioning machines", 28),
    "8418": HSNEntry("8418", "Refrigerators, freezers and other refrigerating equipment", 18),
    "8421": HSNEntry("8421", "Centrifuges; filtering or purifying machinery and apparatus", 18),
    "8443": HSNEntry("8443", "Printing machinery; printers, copying machines and facsimile machines", 18),
    "8450": HSNEntry("8450", "Household or laundry-type washing machines", 18),
    "8467": HSNEntry("8467", "Tools for working in the hand, pneumatic, hydraulic or with motor", 18),
    "8471": HSNEntry("8471", "Automatic data processing machines and units thereof", 18),
    "8473": HSNEntry("8473", "Parts and accessories of office machines and computers", 18),
    "8481": HSNEntry("8481", "Taps, cocks, valves and similar appliances", 18),
    "8482": HSNEntry("8482", "Ball or roller bearings", 18),
    "8483": HSNEntry("8483", "Transmission shafts, bearing housings, gears, flywheels, clutches", 18),
    "8484": HSNEntry("8484", "Gaskets and similar joints; mechanical seals", 18),
    "8501": HSNEntry("8501", "Electric motors and generators", 18),
    "8504": HSNEntry("8504", "Electrical transformers, static converters and inductors", 18),
    "8507": HSNEntry("8507", "Electric accumulators, including separators therefor", 18),
    "8516": HSNEntry("8516", "Electric water heaters, space heaters, hair dryers, irons", 18),
    "8517": HSNEntry("8517", "Telephone sets, including smartphones; other apparatus for transmission of data", 18),
    "8523": HSNEntry("8523", "Discs, tapes, solid-state storage devices, smart cards", 18),
    "8528": HSNEntry("8528", "Monitors and projectors; television reception apparatus", 18),
    "8536": HSNEntry("8536", "Electrical apparatus for switching or protecting circuits, ≤1,000 V", 18),
    "8539": HSNEntry("8539", "Electric filament or discharge lamps; LED lamps", 12),
    "8544": HSNEntry("8544", "Insulated wire, cable and other insulated electric conductors", 18),
    "8703": HSNEntry("8703", "Motor cars and other motor vehicles for transport of persons", 28),
    "8708": HSNEntry("8708", "Parts and accessories of motor vehicles", 28),
    "8711": HSNEntry("8711", "Motorcycles and cycles fitted with an auxiliary motor", 28),
    "8712": HSNEntry("8712", "Bicycles and other cycles, not motorised", 12),
    "9004": HSNEntry("9004", "Spectacles, goggles and the like", 12),
    "9018": HSNEntry("9018", "Instruments and appliances used in medical sciences", 12),
    "9026": HSNEntry("9026", "Instruments for measuring or checking flow, level or pressure", 18),
    "9028": HSNEntry("9028", "Gas, liquid or electricity supply or production meters", 18),
    "9102": HSNEntry("9102", "Wrist-watches, pocket-watches and other watches", 18),
    "9401": HSNEntry("9401", "Seats, whether or not convertible into beds", 18),
    "9403": HSNEntry("9403", "Other furniture and parts thereof", 18),
    "9404": HSNEntry("9404", "Mattress supports; mattresses, quilts, pillows", 18),
    "9405": HSNEntry("9405", "Luminaires and lighting fittings", 18),
    "9503": HSNEntry("9503", "Tricycles, scooters, dolls and other toys", 12),
    "9506": HSNEntry("9506", "Articles and equipment for gymnastics, athletics and sports", 12),
    "9603": HSNEntry("9603", "Brooms, brushes, mops and paint rollers", 18),
    "9608": HSNEntry("9608", "Ball point pens; felt tipped pens and markers", 18),
}

HSN_SUBHEADINGS: dict[str, HSNEntry] = {
    "847130": HSNEntry("847130", "Portable automatic data processing machines (laptops)", 18),
    "847141": HSNEntry("847141", "Data processing machines with CPU, input and output in same housing", 18),
    "847149": HSNEntry("847149", "Other data processing machines (desktops)", 18),
    "847150": HSNEntry("847150", "Processing units (CPUs)", 18),
    "847160": HSNEntry("847160", "Input or output units (keyboards, monitors, printers)", 18),
    "847170": HSNEntry("847170", "Storage units (hard drives, SSDs)", 18),
    "847180": HSNEntry("847180", "Other units of automatic data processing machines", 18),
    "851712": HSNEntry("851712", "Mobile phones for cellular networks", 18),
    "851762": HSNEntry("851762", "Machines for sending/receiving voice, images, or data (routers)", 18),
    "852871": HSNEntry("852871", "Reception apparatus for television, not incorporating video display", 28),
    "852872": HSNEntry("852872", "Reception apparatus for television, colour, incorporating video display", 28),
    "848210": HSNEntry("848210", "Ball bearings", 18),
    "848220": HSNEntry("848220", "Tapered roller bearings", 18),
    "848230": HSNEntry("848230", "Spherical roller bearings", 18),
    "848240": HSNEntry("848240", "Needle roller bearings", 18),
    "848250": HSNEntry("848250", "Cylindrical roller bearings", 18),
    "848280": HSNEntry("848280", "Other ball or roller bearings", 18),
    "848291": HSNEntry("848291", "Balls, needles and rollers for bearings", 18),
    "848299": HSNEntry("848299", "Other parts of bearings", 18),
    "848310": HSNEntry("848310", "Transmission shafts and cranks", 18),
    "848320": HSNEntry("848320", "Bearing housings", 18),
    "848330": HSNEntry("848330", "Plain shaft bearings", 18),
    "848340": HSNEntry("848340", "Gears and gearing; ball screws; gear boxes", 18),
    "848350": HSNEntry("848350", "Flywheels and pulleys", 18),
    "848360": HSNEntry("848360", "Clutches and shaft couplings", 18),
    "848410": HSNEntry("848410", "Gaskets of metal sheeting combined with other material", 18),
    "848420": HSNEntry("848420", "Mechanical seals", 18),
    "850110": HSNEntry("850110", "Electric motors of output not exceeding 37.5 W", 18),
    "850120": HSNEntry("850120", "Universal AC/DC motors of output exceeding 37.5 W", 18),
    "850131": HSNEntry("850131", "DC motors of output not exceeding 750 W", 18),
    "850132": HSNEntry("850132", "DC motors of output 750 W to 75 kW", 18),
    "850140": HSNEntry("850140", "AC motors, single-phase", 18),
    "850151": HSNEntry("850151", "AC motors, multi-phase, output not exceeding 750 W", 18),
    "850152": HSNEntry("850152", "AC motors, multi-phase, output 750 W to 75 kW", 18),
    "850410": HSNEntry("850410", "Ballasts for discharge lamps or tubes", 18),
    "850421": HSNEntry("850421", "Liquid dielectric transformers, power handling ≤650 kVA", 18),
    "850422": HSNEntry("850422", "Liquid dielectric transformers, power 650 kVA to 10000 kVA", 18),
    "850431": HSNEntry("850431", "Other transformers, power handling ≤1 kVA", 18),
    "850432": HSNEntry("850432", "Other transformers, power 1 kVA to 16 kVA", 18),
    "850433": HSNEntry("850433", "Other transformers, power 16 kVA to 500 kVA", 18),
    "850440": HSNEntry("850440", "Static converters (rectifiers, inverters, UPS)", 18),
    "850450": HSNEntry("850450", "Inductors", 18),
    "853610": HSNEntry("853610", "Fuses for a voltage not exceeding 1,000 V", 18),
    "853620": HSNEntry("853620", "Automatic circuit breakers for voltage ≤1,000 V", 18),
    "853630": HSNEntry("853630", "Other apparatus for protecting electrical circuits", 18),
    "853641": HSNEntry("853641", "Relays for a voltage not exceeding 60 V", 18),
    "853649": HSNEntry("853649", "Other relays for voltage ≤1,000 V", 18),
    "853650": HSNEntry("853650", "Switches for voltage ≤1,000 V", 18),
    "853661": HSNEntry("853661", "Lamp-holders", 18),
    "853669": HSNEntry("853669", "Plugs and sockets for voltage ≤1,000 V", 18),
    "853670": HSNEntry("853670", "Connectors for optical fibres and cables", 18),
    "853690": HSNEntry("853690", "Other apparatus for switching electrical circuits", 18),
    "841311": HSNEntry("841311", "Pumps for dispensing fuel at filling stations", 18),
    "841319": HSNEntry("841319", "Other pumps fitted with measuring device", 18),
    "841320": HSNEntry("841320", "Hand pumps", 18),
    "841330": HSNEntry("841330", "Fuel, lubricating or cooling pumps for engines", 18),
    "841340": HSNEntry("841340", "Concrete pumps", 18),
    "841350": HSNEntry("841350", "Other reciprocating positive displacement pumps", 18),
    "841360": HSNEntry("841360", "Other rotary positive displacement pumps", 18),
    "841370": HSNEntry("841370", "Centrifugal pumps", 18),
    "841381": HSNEntry("841381", "Other pumps", 18),
    "841391": HSNEntry("841391", "Parts of pumps", 18),
    "841410": HSNEntry("841410", "Vacuum pumps", 18),
    "841420": HSNEntry("841420", "Hand or foot-operated air pumps", 18),
    "841430": HSNEntry("841430", "Compressors for refrigerating equipment", 18),
    "841440": HSNEntry("841440", "Air compressors mounted on wheeled chassis", 18),
    "848110": HSNEntry("848110", "Pressure-reducing valves", 18),
    "848120": HSNEntry("848120", "Valves for oleohydraulic or pneumatic transmissions", 18),
    "848130": HSNEntry("848130", "Check valves", 18),
    "848140": HSNEntry("848140", "Safety or relief valves", 18),
    "848180": HSNEntry("848180", "Other taps, cocks, valves", 18),
    "848190": HSNEntry("848190", "Parts of valves", 18),
    "842121": HSNEntry("842121", "Filtering or purifying machinery for water", 18),
    "842129": HSNEntry("842129", "Filtering or purifying machinery for other liquids", 18),
    "842131": HSNEntry("842131", "Intake air filters for internal combustion engines", 18),
    "842139": HSNEntry("842139", "Filtering or purifying machinery for gases", 18),
    "842191": HSNEntry("842191", "Parts of centrifuges", 18),
    "842199": HSNEntry("842199", "Parts of filtering or purifying machinery", 18),
    "870321": HSNEntry("870321", "Motor vehicles with spark-ignition engine ≤1000 cc", 28),
    "870322": HSNEntry("870322", "Motor vehicles with spark-ignition engine 1000-1500 cc", 28),
    "870323": HSNEntry("870323", "Motor vehicles with spark-ignition engine 1500-3000 cc", 28),
    "870324": HSNEntry("870324", "Motor vehicles with spark-ignition engine >3000 cc", 28),
    "870331": HSNEntry("870331", "Motor vehicles with diesel engine ≤1500 cc", 28),
    "870332": HSNEntry("870332", "Motor vehicles with diesel engine 1500-2500 cc", 28),
    "870333": HSNEntry("870333", "Motor vehicles with diesel engine >2500 cc", 28),
    "870340": HSNEntry("870340", "Other vehicles with electric motor", 5),
    "870810": HSNEntry("870810", "Bumpers and parts thereof for motor vehicles", 28),
    "870821": HSNEntry("870821", "Safety seat belts for motor vehicles", 28),
    "870829": HSNEntry("870829", "Other parts of bodies for motor vehicles", 28),
    "870830": HSNEntry("870830", "Brakes and servo-brakes and parts for motor vehicles", 28),
    "870840": HSNEntry("870840", "Gear boxes and parts for motor vehicles", 28),
    "870850": HSNEntry("870850", "Drive-axles with differential for motor vehicles", 28),
    "870870": HSNEntry("870870", "Road wheels and parts for motor vehicles", 28),
    "870880": HSNEntry("870880", "Suspension shock-absorbers for motor vehicles", 28),
    "870891": HSNEntry("870891", "Radiators and parts for motor vehicles", 28),
    "870892": HSNEntry("870892", "Silencers and exhaust pipes for motor vehicles", 28),
    "870893": HSNEntry("870893", "Clutches and parts for motor vehicles", 28),
    "870894": HSNEntry("870894", "Steering wheels, columns and boxes for motor vehicles", 28),
    "870895": HSNEntry("870895", "Safety airbags; parts for motor vehicles", 28),
    "870899": HSNEntry("870899", "Other parts and accessories for motor vehicles", 28),
}

HSN_TARIFF: dict[str, HSNEntry] = {
    "84821010": HSNEntry("84821010", "Ball bearings with greatest external diameter not exceeding 30 mm", 18),
    "84821090": HSNEntry("84821090", "Other ball bearings", 18),
    "84822010": HSNEntry("84822010", "Tapered roller bearings, including cone and tapered roller assemblies", 18),
    "84823000": HSNEntry("84823000", "Spherical roller bearings", 18),
    "84824000": HSNEntry("84824000", "Needle roller bearings", 18),
    "84829900": HSNEntry("84829900", "Other parts of bearings", 18),
    "84831010": HSNEntry("84831010", "Crank shafts for automobiles", 18),
    "84831020": HSNEntry("84831020", "Cam shafts for automobiles", 18),
    "84831090": HSNEntry("84831090", "Other transmission shafts and cranks", 18),
    "84833000": HSNEntry("84833000", "Bearing housings; plain shaft bearings", 18),
    "84834000": HSNEntry("84834000", "Gears and gearing; ball screws; gear boxes; torque converters", 18),
    "84841000": HSNEntry("84841000", "Gaskets of metal sheeting combined with other material", 18),
    "84842000": HSNEntry("84842000", "Mechanical seals", 18),
    "84212100": HSNEntry("84212100", "Filtering or purifying machinery for water", 18),
    "84212910": HSNEntry("84212910", "Oil purifiers for internal combustion engines", 18),
    "84212990": HSNEntry("84212990", "Other filtering or purifying machinery for liquids", 18),
    "84713010": HSNEntry("84713010", "Personal computers (laptops, notebooks)", 18),
    "84713090": HSNEntry("84713090", "Other portable digital automatic data processing machines", 18),
    "84714110": HSNEntry("84714110", "Micro computers", 18),
    "84714190": HSNEntry("84714190", "Other digital automatic data processing machines", 18),
    "85171210": HSNEntry("85171210", "Push button type cellular phones", 18),
    "85171290": HSNEntry("85171290", "Other telephones for cellular networks (smartphones)", 18),
}

SAC_GROUPS: dict[str, HSNEntry] = {
    "9954": HSNEntry("9954", "Construction services", 18),
    "9961": HSNEntry("9961", "Services in wholesale trade", 18),
    "9962": HSNEntry("9962", "Services in retail trade", 18),
    "9963": HSNEntry("9963", "Accommodation, food and beverage services", 18),
    "9964": HSNEntry("9964", "Passenger transport services", 5),
    "9965": HSNEntry("9965", "Goods transport services", 5),
    "9966": HSNEntry("9966", "Rental services of transport vehicles with operators", 18),
    "9967": HSNEntry("9967", "Supporting services in transport", 18),
    "9968": HSNEntry("9968", "Postal and courier services", 18),
    "9969": HSNEntry("9969", "Electricity, gas, water and other distribution services", 18),
    "9971": HSNEntry("9971", "Financial and related services", 18),
    "9972": HSNEntry("9972", "Real estate services", 18),
    "9973": HSNEntry("9973", "Leasing or rental services without operator", 18),
    "9981": HSNEntry("9981", "Research and development services", 18),
    "9982": HSNEntry("9982", "Legal and accounting services", 18),
    "9983": HSNEntry("9983", "Other professional, technical and business services", 18),
    "9984": HSNEntry("9984", "Telecommunications, broadcasting and information supply services", 18),
    "9985": HSNEntry("9985", "Support services", 18),
    "9986": HSNEntry("9986", "Support services to agriculture, hunting, forestry, fishing, mining", 18),
    "9987": HSNEntry("9987", "Maintenance, repair and installation (except construction) services", 18),
    "9988": HSNEntry("9988", "Manufacturing services on physical inputs owned by others", 12),
    "9989": HSNEntry("9989", "Other manufacturing services; publishing, printing and reproduction", 18),
    "9991": HSNEntry("9991", "Public administration and other services provided to the community", 18),
    "9992": HSNEntry("9992", "Education services", 0),
    "9993": HSNEntry("9993", "Human health and social care services", 0),
    "9994": HSNEntry("9994", "Sewage and waste collection, treatment and disposal services", 18),
    "9995": HSNEntry("9995", "Services of membership organisations", 18),
    "9996": HSNEntry("9996", "Recreational, cultural and sporting services", 18),
    "9997": HSNEntry("9997", "Other services", 18),
    "9998": HSNEntry("9998", "Domestic services", 18),
    "9999": HSNEntry("9999", "Services provided by extraterritorial organisations and bodies", 18),
}

SAC_SERVICES: dict[str, HSNEntry] = {
    "995411": HSNEntry("995411", "Construction services of single dwelling or multi dwelling buildings", 18),
    "995415": HSNEntry("995415", "Construction services of industrial buildings", 18),
    "995461": HSNEntry("995461", "Electrical installation services", 18),
    "995468": HSNEntry("995468", "Other installation services", 18),
    "996311": HSNEntry("996311", "Room or unit accommodation services", 12),
    "996331": HSNEntry("996331", "Services provided by restaurants, cafes and similar eating facilities", 5),
    "996334": HSNEntry("996334", "Event, party and outdoor catering services", 18),
    "996411": HSNEntry("996411", "Local land transport services of passengers by road", 5),
    "996425": HSNEntry("996425", "Domestic air transport services of passengers", 5),
    "996511": HSNEntry("996511", "Road transport services of goods", 5),
    "996601": HSNEntry("996601", "Rental services of road vehicles with operators", 18),
    "996719": HSNEntry("996719", "Other cargo and baggage handling services", 18),
    "996729": HSNEntry("996729", "Other storage and warehousing services", 18),
    "996812": HSNEntry("996812", "Courier services", 18),
    "997111": HSNEntry("997111", "Central banking services", 18),
    "997113": HSNEntry("997113", "Deposit services", 18),
    "997212": HSNEntry("997212", "Rental or leasing services involving own or leased non-residential property", 18),
    "997319": HSNEntry("997319", "Leasing or rental services concerning other machinery and equipment", 18),
    "998211": HSNEntry("998211", "Legal advisory and representation services", 18),
    "998221": HSNEntry("998221", "Financial auditing services", 18),
    "998222": HSNEntry("998222", "Accounting and bookkeeping services", 18),
    "998231": HSNEntry("998231", "Corporate tax consulting and preparation services", 18),
    "998311": HSNEntry("998311", "Management consulting and management services", 18),
    "998313": HSNEntry("998313", "Information technology consulting and support services", 18),
    "998314": HSNEntry("998314", "Information technology design and development services", 18),
    "998315": HSNEntry("998315", "Hosting and information technology infrastructure provisioning services", 18),
    "998316": HSNEntry("998316", "IT infrastructure and network management services", 18),
    "998321": HSNEntry("998321", "Architectural advisory services", 18),
    "998331": HSNEntry("998331", "Engineering advisory services", 18),
    "998361": HSNEntry("998361", "Advertising services", 18),
    "998371": HSNEntry("998371", "Market research services", 18),
    "998399": HSNEntry("998399", "Other professional, technical and business services", 18),
    "998412": HSNEntry("998412", "Fixed telephony services", 18),
    "998413": HSNEntry("998413", "Mobile telecommunications services", 18),
    "998422": HSNEntry("998422", "Internet access services in wired and wireless networks", 18),
    "998431": HSNEntry("998431", "On-line text based information such as online books, newspapers", 18),
    "998511": HSNEntry("998511", "Executive or retained personnel search services", 18),
    "998519": HSNEntry("998519", "Other employment and labour supply services", 18),
    "998521": HSNEntry("998521", "Investigation services", 18),
    "998525": HSNEntry("998525", "Security guard services", 18),
    "998533": HSNEntry("998533", "Cleaning services", 18),
    "998596": HSNEntry("998596", "Events, exhibitions, conventions and trade shows organisation services", 18),
    "998713": HSNEntry("998713", "Maintenance and repair services of commercial and industrial machinery", 18),
    "998714": HSNEntry("998714", "Maintenance and repair services of motor vehicles", 18),
    "998717": HSNEntry("998717", "Maintenance and repair services of computers and peripheral equipment", 18),
    "998719": HSNEntry("998719", "Maintenance and repair services of other machinery and equipment", 18),
    "998732": HSNEntry("998732", "Installation services of industrial, manufacturing and service industry machinery", 18),
    "998821": HSNEntry("998821", "Textile manufacturing services", 5),
    "998898": HSNEntry("998898", "Other manufacturing services", 12),
    "998912": HSNEntry("998912", "Printing and reproduction services of recorded media", 18),
    "999210": HSNEntry("999210", "Pre-primary education services", 0),
    "999293": HSNEntry("999293", "Commercial training and coaching services", 18),
    "999311": HSNEntry("999311", "Inpatient services", 0),
    "999411": HSNEntry("999411", "Sewerage and sewage treatment services", 18),
    "999611": HSNEntry("999611", "Sound recording services", 18),
    "999631": HSNEntry("999631", "Services of performing and other artists", 18),
    "999721": HSNEntry("999721", "Hairdressing and barbers services", 18),
    "999792": HSNEntry("999792", "Agreeing to do an act", 18),
}
