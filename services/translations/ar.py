# -*- coding: utf-8 -*-
"""Arabic translations."""

AR_TRANSLATIONS = {
    # Yes / No
    "common.yes": "نعم",
    "common.no": "لا",

    # Progress
    "progress.step_of": "الخطوة {step} من {total}",

    # Steps
    "step.location": "معلومات الموقع",
    "step.building": "معلومات المبنى",
    "step.my_floors": "الطوابق المسجلة باسمي",
    "step.full_building": "قاطنو المبنى",
    "step.contact": "معلومات التواصل",
    "step.review": "المراجعة النهائية",
    "step.submitted": "تم الإرسال",

    # Validation - Step 1 (location)
    "validation.sector.required": "الرجاء اختيار القطاع",
    "validation.village.required": "الرجاء اختيار المنطقة العقارية",
    "validation.village.not_in_sector": "المنطقة العقارية غير موجودة في القطاع المختار",
    "validation.neighborhood.required": "الرجاء إدخال الحي",
    "validation.building_name.required": "الرجاء إدخال اسم المبنى",
    "validation.street.required": "الرجاء إدخال اسم الشارع",

    # Validation - Step 2 (building)
    "validation.property_number.required": "الرجاء اختيار رقم العقار",
    "validation.property_number.not_in_village": "رقم العقار غير موجود في المنطقة العقارية المختارة",
    "validation.section_number.required": "الرجاء إدخال رقم القسم",
    "validation.block.required": "الرجاء إدخال البلوك",
    "validation.building_count.required": "الرجاء إدخال عدد المباني/البلوكات",
    "validation.building_count.invalid": "عدد المباني يجب أن يكون رقماً موجباً",
    "validation.building_type.required": "الرجاء اختيار نوع المبنى",
    "validation.total_floors.required": "الرجاء إدخال عدد الطوابق",
    "validation.total_floors.invalid": "عدد الطوابق يجب أن يكون رقماً موجباً",
    "validation.floor_number.required": "الرجاء إدخال رقم الطابق",
    "validation.floor_number.invalid": "رقم الطابق يجب أن يكون رقماً غير سالب",
    "validation.section_type.required": "الرجاء اختيار نوع القسم",
    "validation.direction.required": "الرجاء اختيار الجهة",

    # Validation - repeatable entries (batch alerts)
    "validation.floors.incomplete": "الرجاء ملء جميع الحقول المطلوبة لجميع الطوابق",
    "validation.residents.incomplete": "الرجاء ملء جميع الحقول المطلوبة لجميع القاطنين",
    "validation.residents.primary_contact": "بيانات القاطن الأول غير صحيحة: الاسم الثلاثي كاملاً واسم الأم والقيد ورقم هاتف صحيح مطلوبة",

    # Validation - Step 3 (contact)
    "validation.full_name.required": "الرجاء إدخال الاسم الثلاثي كاملاً",
    "validation.mother_name.required": "الرجاء إدخال اسم الأم",
    "validation.registry.required": "الرجاء إدخال رقم السجل",
    "validation.phone.required": "الرجاء إدخال رقم الهاتف",
    "validation.phone.invalid": "رقم الهاتف غير صحيح",

    # Entries
    "entry.floor.title": "طابق رقم {number}",
    "entry.resident.title": "قاطن رقم {number}",

    # Submission
    "submission.remaining": "يمكنك تسجيل {remaining} منازل إضافية",
    "submission.limit_reached": "لقد وصلت إلى الحد الأقصى من التسجيلات",
    "submission.capacity_exceeded": "لقد وصلت إلى الحد الأقصى من التسجيلات ({limit}). للمزيد من التسجيلات، يرجى الاتصال بنا.",
    "submission.invalid": "بيانات الاستمارة غير مكتملة",
    "submission.location_mismatch": "الموقع المختار غير موجود في قائمة المواقع",

    # Export
    "export.empty": "لا توجد بيانات للتصدير. الرجاء إدخال بيانات أولاً.",
    "export.success": "تم تصدير {count} سجل بنجاح إلى ملف {filename}",
    "export.skipped": "تم تجاهل {count} سجل تالف",

    # Variant labels (review)
    "variant.single": "إدخال واحد",
    "variant.my_floors": "طوابق مسجلة باسمي",
    "variant.full_building": "مبنى كامل",

    # Building types
    "mapping.building_type.residential": "سكني",
    "mapping.building_type.commercial": "تجاري",
    "mapping.building_type.mixed_use": "مختلط",
    "mapping.building_type.industrial": "صناعي",
    "mapping.building_type.public": "عام",
    "mapping.building_type.other": "أخرى",

    # Section types
    "mapping.section_type.house": "منزل",
    "mapping.section_type.shop": "محل",
    "mapping.section_type.warehouse": "مستودع",
    "mapping.section_type.office": "مكتب",
    "mapping.section_type.clinic": "عيادة",
    "mapping.section_type.factory": "معمل",
    "mapping.section_type.other": "أخرى",

    # Directions
    "mapping.direction.north": "شمالي",
    "mapping.direction.south": "جنوبي",
    "mapping.direction.east": "شرقي",
    "mapping.direction.west": "غربي",
    "mapping.direction.northeast": "شمال شرقي",
    "mapping.direction.northwest": "شمال غربي",
    "mapping.direction.southeast": "جنوب شرقي",
    "mapping.direction.southwest": "جنوب غربي",

    "mapping.not_specified": "غير محدد",

    # Export column headers
    "column.registration_index": "رقم السجل",
    "column.registration_date": "تاريخ التسجيل",
    "column.sector": "القطاع",
    "column.village": "القرية",
    "column.neighborhood": "الحي",
    "column.building_name": "اسم المبنى",
    "column.street": "اسم الشارع",
    "column.property_number": "رقم العقار",
    "column.section_number": "رقم القسم",
    "column.in_building": "ضمن مبنى",
    "column.block": "رقم الكتلة/المبنى",
    "column.building_count": "عدد المباني",
    "column.building_type": "نوع المبنى",
    "column.total_floors": "عدد الطوابق",
    "column.floor_number": "رقم الطابق",
    "column.section_type": "نوع القسم",
    "column.direction": "الاتجاه",
    "column.full_name": "الاسم الكامل",
    "column.mother_name": "اسم الأم",
    "column.registry": "القيد",
    "column.phone": "رقم الهاتف",
    "column.entry_type": "نوع الإدخال",
    "column.entry_count": "عدد الإدخالات",
    "column.entry_floor_number": "رقم الطابق الإضافي",
    "column.entry_section_type": "نوع القسم الإضافي",
    "column.entry_direction": "الاتجاه الإضافي",
    "column.entry_registrant_name": "اسم المسجل",
    "column.resident_full_name": "اسم الساكن",
    "column.resident_mother_name": "اسم أم الساكن",
    "column.resident_registry": "قيد الساكن",
    "column.resident_phone": "هاتف الساكن",
    "column.resident_floor": "طابق الساكن",
    "column.resident_section_type": "نوع قسم الساكن",
    "column.resident_direction": "اتجاه الساكن",
}
